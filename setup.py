#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Setup script for m6APrediction package
"""

from setuptools import setup, find_packages

setup(
    name="m6APrediction",
    version="1.0.0",
    description="m6APrediction: m6A RNA methylation site prediction with a pre-trained classifier",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "m6APrediction": ["data/*.csv"],
    },
    install_requires=[
        "numpy>=1.19.0",
        "pandas>=1.1.0",
        "scikit-learn>=1.0.0",
        "joblib>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'm6APrediction=m6APrediction.__main__:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    python_requires=">=3.8",
)
