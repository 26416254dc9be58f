#!/usr/bin/env python3
"""
Wink Attributes Setup
"""

from setuptools import setup, find_packages

# Read requirements from requirements.txt
with open('requirements.txt') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="wink-attributes",
    version="1.0.0",
    description="Ordered HTML attribute maps with parsing and serialization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Wink Browser Team",
    author_email="team@winkbrowser.example.com",
    url="https://github.com/yourusername/wink-attributes",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "wink-attributes=html_attributes.main:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
    keywords="html, attributes, markup, html5",
    project_urls={
        "Bug Reports": "https://github.com/yourusername/wink-attributes/issues",
        "Source": "https://github.com/yourusername/wink-attributes",
    },
)
