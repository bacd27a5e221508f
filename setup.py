"""
Setup configuration for the slugify-advanced package.

This script uses setuptools to package and distribute the slugify-advanced
library. It also reads the requirements and long description directly
from external files for ease of maintenance.
"""
from setuptools import find_packages, setup

VERSION = "1.0.1"


def read_requirements(filename="requirements.txt"):
    """
    Read requirements from a requirements file.
    """
    with open(filename, encoding="UTF-8") as file:
        return [line.strip() for line in file if line.strip() and not line.startswith("#")]


def get_long_description():
    """
    Read README.md file.
    """
    with open("README.md", encoding="utf8") as file:
        return file.read()


setup(
    name="slugify-advanced",
    description="Configurable, locale-aware slug generation for URLs, filenames and keys.",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    author="slugify-advanced contributors",
    url="https://github.com/venkatajanapareddy/slugify-advanced",
    project_urls={
        "Documentation": "https://github.com/venkatajanapareddy/slugify-advanced",
        "Issues": "https://github.com/venkatajanapareddy/slugify-advanced/issues",
        "Changelog": "https://github.com/venkatajanapareddy/slugify-advanced/releases",
    },
    license="MIT",
    version=VERSION,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=read_requirements(),
    extras_require={
        "test": read_requirements("requirements-test.txt"),
    },
    entry_points={
        "console_scripts": [
            "slugify-advanced=slugify_advanced.cli:cli",
        ]
    },
    python_requires=">=3.10",
)
