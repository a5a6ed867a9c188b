"""Run `propcheck` as `python -m propcheck`."""
from propcheck import cli


if __name__ == '__main__':
    cli.run()
