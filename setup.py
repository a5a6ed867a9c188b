"""Installation script."""
import setuptools


PACKAGE_NAME = 'propcheck'
DESCRIPTION = (
    'Check propositional theorems '
    'by enumerating truth tables.')
README = 'README.md'
VERSION_FILE = f'{PACKAGE_NAME}/_version.py'
MAJOR = 0
MINOR = 1
MICRO = 0
VERSION = f'{MAJOR}.{MINOR}.{MICRO}'
VERSION_FILE_TEXT = (
    '# This file was generated from setup.py\n'
    "version = '{version}'\n")
PYTHON_REQUIRES = '>=3.11'
INSTALL_REQUIRES = [
    'astutils >= 0.0.5']
TESTS_REQUIRE = ['pytest >= 4.6.11']
CLASSIFIERS = [
    'Development Status :: 2 - Pre-Alpha',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering']
KEYWORDS = [
    'propositional', 'logic', 'formula',
    'axiom', 'theorem', 'conjecture',
    'counterexample', 'truth table',
    'enumeration', 'validity', 'consistency',
    'parser']


def run_setup():
    """Write version file, install."""
    version = VERSION
    s = VERSION_FILE_TEXT.format(version=version)
    with open(VERSION_FILE, 'w') as f:
        f.write(s)
    with open(README) as fd:
        long_description = fd.read()
    setuptools.setup(
        name=PACKAGE_NAME,
        version=version,
        description=DESCRIPTION,
        long_description=long_description,
        long_description_content_type='text/markdown',
        author='Caltech Control and Dynamical Systems',
        author_email='tulip@tulip-control.org',
        license='BSD',
        python_requires=PYTHON_REQUIRES,
        install_requires=INSTALL_REQUIRES,
        tests_require=TESTS_REQUIRE,
        extras_require=dict(test=TESTS_REQUIRE),
        packages=[
            PACKAGE_NAME,
            'propcheck.logic'],
        package_dir={PACKAGE_NAME: PACKAGE_NAME},
        entry_points={
            'console_scripts': [
                'propcheck = propcheck.cli:run']},
        classifiers=CLASSIFIERS,
        keywords=KEYWORDS)


if __name__ == '__main__':
    run_setup()
