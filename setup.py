#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

import pathlib

from setuptools import find_packages, setup

readme = pathlib.Path("README.rst").read_text()
history = pathlib.Path("HISTORY.rst").read_text()

requirements = pathlib.Path("requirements.txt").read_text().strip().splitlines()
test_requirements = (
    pathlib.Path("requirements_dev.txt").read_text().strip().splitlines()
)

setup(
    author="Phillip Cloud",
    author_email="cpcloud@gmail.com",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    description="An immutable sorted set backed by a flat array",
    install_requires=requirements,
    extras_require={"test": test_requirements},
    license="Apache Software License 2.0",
    long_description="{}\n\n{}".format(readme, history),
    include_package_data=True,
    keywords="arrayset",
    name="arrayset",
    packages=find_packages(include=["arrayset", "arrayset.*"]),
    url="https://github.com/cpcloud/arrayset",
    version="0.1.0",
    zip_safe=False,
    python_requires=">=3.8",
)
