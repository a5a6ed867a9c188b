"""Parser and syntax trees for propositional formulas."""
