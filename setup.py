#!/usr/bin/env python

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst', encoding='utf-8') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst', encoding='utf-8') as history_file:
    history = history_file.read()

requirements = ['requests>=2.27']

setup_requirements = [ ]

test_requirements = [ ]

setup(
    author="korrektor contributors",
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Natural Language :: Uzbek',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Text Processing :: Linguistic',
    ],
    description="Normalization tools for Uzbek texts: sorting, numbers to words, transliteration, corrections",
    entry_points={
        'console_scripts': [
            'korrektor=korrektor.cli:main',
        ],
    },
    install_requires=requirements,
    license="GNU General Public License v3",
    long_description=readme + '\n\n' + history,
    include_package_data=True,
    keywords='korrektor uzbek transliteration',
    name='korrektor',
    packages=find_packages(include=['korrektor', 'korrektor.*']),
    setup_requires=setup_requirements,
    test_suite='korrektor.test',
    tests_require=test_requirements,
    version='0.1.0',
    zip_safe=False,
)
