#!/usr/bin/env python

from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="iapcheck",
    version="1.0.0",
    description="Validate Apple In-App Purchase receipts and check entitlements",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    keywords="iap appstore receipt subscription django",
    author="Educreations Engineering",
    author_email="engineering@educreations.com",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=["iapcheck"],
    package_dir={"iapcheck": "iapcheck"},
    python_requires=">=3.7",
    install_requires=[
        "Django>=2.2",
        "pytz",
        "requests",
    ],
    extras_require={"test": ["pytest", "pytest-django", "responses", "flake8"]},
)
