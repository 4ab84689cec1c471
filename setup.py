import os

from setuptools import find_packages, setup

VERSION = '0.1.0'


def parse_md_readme():
    """
    read the readme to use as the long description, returns an empty string when the readme is missing
    """
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')) as fh:
            return fh.read()
    except OSError:
        return ''


TEST_REQS = [
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'biopython>=1.70',
    'numpy>=1.13.1',
]


setup(
    name='varcon',
    version='{}'.format(VERSION),
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Transcript-level consequence and HGVS annotation of genome changes',
    long_description=parse_md_readme(),
    long_description_content_type='text/markdown',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.6',
    test_suite='tests',
)
