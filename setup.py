'''Package setup for abstract-shapes'''
import os
import sys
from setuptools import setup, find_packages

# Ensure we can import from the package directory
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'abstract_shapes'))

# Import version information
from _version import (
    __version__, __title__, __description__, __author__,
    __author_email__, __url__, __license__
)

# Read long description from README
def read_readme():
    """Read README.md for long description."""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    try:
        with open(readme_path, "r", encoding="utf-8") as fh:
            return fh.read()
    except FileNotFoundError:
        return __description__

setup(
    name=__title__,
    version=__version__,
    author=__author__,
    author_email=__author_email__,
    description=__description__,
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    url=__url__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Natural Language :: English",
        "Environment :: Console",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "pandas>=1.3.0",
        "matplotlib>=3.4.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "flake8>=4.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "abstract-shapes=abstract_shapes.cli:main",
        ],
    },
    keywords=[
        "design-patterns", "abstract-factory", "factory", "shapes", "education",
    ],
    zip_safe=False,
    platforms=["any"],
    license=__license__,
)
