#!/usr/bin/env python
# -*- encoding: utf-8 -*-

import pathlib

from setuptools import find_packages
from setuptools import setup


# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()


setup(
    name='rcv_tabulator',
    version='0.1.0',
    description='Tabulate ranked choice (instant runoff) elections',
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages('src'),
    package_dir={'': 'src'},
    package_data={'rcv_tabulator': ['run_config_settings.json']},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Operating System :: Unix',
        'Operating System :: POSIX',
        'Operating System :: Microsoft :: Windows',
        'Programming Language :: Python :: 3',
        'Topic :: Utilities',
    ],
    keywords=[
        'rcv', 'irv', 'instant runoff', 'ranked choice', 'election',
    ],
    python_requires='>=3.7',
    install_requires=[
        'tqdm>=4.56.0',
        'pandas>=1.4.0',
    ],
    extras_require={
        'test': ['pytest>=6.2.4'],
    },
    entry_points={
        'console_scripts': [
            'rcv-tabulator = rcv_tabulator.cli:main',
        ]
    },
)
