#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="meshraw",
    version="1.0.0",
    description="Concatenate the point data arrays of VTK mesh files into raw text or binary matrices",
    author="meshraw developers",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "meshio>=5.0.0",
    ],
    extras_require={
        "pyvista": ["pyvista>=0.38.0"],
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "meshraw=meshraw.cli.app:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
    ],
)
