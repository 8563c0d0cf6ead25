#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.md') as readme_file:
    readme = readme_file.read()

requirements = ['numpy', 'scipy', 'numba', ]

test_requirements = ['pytest', 'sympy', ]

setup(
    author="Tyler Jarvis",
    author_email='jarvis@math.byu.edu',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    description="Common roots of square polynomial systems by stabilized normal forms.",
    install_requires=requirements,
    extras_require={'test': test_requirements},
    license="MIT license",
    long_description=readme + '\n\n',
    include_package_data=True,
    keywords='TVBSolve polynomial roots Macaulay',
    name='TVBSolve',
    packages=find_packages(include=['tvbsolve']),
    url='https://github.com/tylerjarvis/RootFinding',
    version='0.1.0',
    zip_safe=False,
)
