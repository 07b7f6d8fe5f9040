"""
Setup script for EarthScene - interactive Earth, clouds, starfield and asteroid viewer
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README file
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text() if readme_path.exists() else ""

setup(
    name="earthscene",
    version="0.1.0",
    description="Interactive textured Earth scene with orbit controls",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="EarthScene Development Team",
    packages=find_packages(include=["earthscene", "earthscene.*"]),
    package_data={"earthscene": ["textures/*.jpg", "textures/*.png"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "PyQt6>=6.0.0",
        "vtk>=9.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "flake8>=3.8",
        ]
    },
    entry_points={
        "console_scripts": [
            "earthscene=earthscene.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Scientific/Engineering :: Visualization",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="earth, globe, 3d visualization, vtk, orbit controls",
)
