"""Setup configuration for file-inventory package."""

from setuptools import find_packages, setup

# Read version from __version__.py
version = {}
with open("src/python/file_inventory/__version__.py") as f:
    exec(f.read(), version)

# Read README
with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="file-inventory",
    version=version["__version__"],
    description="Directory metadata inventory with EXIF extraction, written as JSON",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="File Inventory Team",
    python_requires=">=3.11",
    package_dir={"": "src/python"},
    packages=find_packages(where="src/python"),
    install_requires=[
        "pyyaml>=6.0.1",
        "pandas>=2.1.4",
        "pillow>=10.2.0",
        "exifread>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "file-inventory=file_inventory.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
    ],
)
