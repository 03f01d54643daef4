"""
nsivideoconvert - Client for nsi.videoconvert nodes
===================================================

A small Python library to submit videos to a nsi.videoconvert node and
check whether their conversion is done.

License: MIT
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="nsivideoconvert",
    version="0.1.0",
    description="A simple library to access a nsi.videoconvert node",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/nsi-iff/nsivideoconvert-python",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Video :: Conversion",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "httpx>=0.24",
    ],
    extras_require={
        "dev": ["pytest>=7.0", "pytest-cov>=4.0", "black>=22.0", "flake8>=5.0"],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="video conversion videoconvert nsi client",
    project_urls={
        "Source": "https://github.com/nsi-iff/nsivideoconvert-python",
    },
)
