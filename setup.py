"""
Setup script for crsgeom package
Coordinate-system-aware geometry types, algorithms and reprojection
"""
from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="crsgeom",
    version="0.1.0",
    description="CRS-aware geometry abstraction: capability protocols, generic algorithms and reprojection",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: GIS",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        # Core scientific stack
        "numpy>=1.20",
    ],
    extras_require={
        # Geospatial adapters, each usable on its own
        "shapely": [
            "shapely>=1.8,<3.0",
        ],
        "proj": [
            "pyproj>=3.0,<4.0",
        ],
        "all": [
            "shapely>=1.8,<3.0",
            "pyproj>=3.0,<4.0",
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=3.0",
            "shapely>=1.8,<3.0",
            "pyproj>=3.0,<4.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
