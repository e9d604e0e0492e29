"""
Setup script for distfamilies.
"""

from setuptools import find_packages, setup

setup(
    name="distfamilies",
    version="0.1.0",
    description=(
        "Parametric probability distributions with canonical reparameterizations "
        "and a uniform density/CDF/quantile/sampling contract"
    ),
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
        "mypy_extensions>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
