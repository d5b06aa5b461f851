#!/usr/bin/env python3
"""
Setup script for the Compensated Summation Library

Pure Python package: error-free transforms and Kahan-Babuška(-Neumaier)
compensated summation over builtin floats, NumPy and PyTorch.
"""

from pathlib import Path

from setuptools import setup, find_packages

# Package metadata
PACKAGE_NAME = "compensated-summation"
VERSION = "1.0.0"
DESCRIPTION = "Compensated floating-point summation with Kahan-Babuska and Kahan-Babuska-Neumaier algorithms"
AUTHOR = "Compensated Summation Contributors"
LICENSE = "MIT"


# Read long description from README
def read_readme():
    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return DESCRIPTION


# Package requirements
def get_requirements():
    """Get package requirements."""
    base_requirements = [
        "numpy>=1.19.0",
        "torch>=1.9.0",
    ]

    test_requirements = [
        "pytest>=6.0",
        "pytest-cov>=2.0",
    ]

    bench_requirements = [
        "pandas>=1.1",
        "matplotlib>=3.3",
        "psutil>=5.7",
    ]

    return {
        "base": base_requirements,
        "test": test_requirements,
        "bench": bench_requirements,
    }


def main():
    """Main setup function."""
    requirements = get_requirements()

    # Extras require for optional dependencies
    extras_require = {
        "test": requirements["test"],
        "bench": requirements["bench"],
        "dev": requirements["test"] + requirements["bench"],
    }

    setup(
        name=PACKAGE_NAME,
        version=VERSION,
        description=DESCRIPTION,
        long_description=read_readme(),
        long_description_content_type="text/markdown",
        author=AUTHOR,
        license=LICENSE,

        # Package configuration
        packages=find_packages(include=["compsum", "compsum.*"]),

        # Dependencies
        install_requires=requirements["base"],
        extras_require=extras_require,
        python_requires=">=3.8",
        zip_safe=True,

        # Metadata for PyPI
        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Science/Research",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python :: 3",
            "Topic :: Scientific/Engineering :: Mathematics",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Operating System :: OS Independent",
        ],
        keywords=[
            "numerical", "summation", "kahan", "neumaier", "floating-point",
            "precision", "error-free-transform", "scientific-computing"
        ],
    )


if __name__ == "__main__":
    main()
