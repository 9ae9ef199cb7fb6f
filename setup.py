#!/usr/bin/env python
from setuptools import (
    find_packages,
    setup,
)

extras_require = {
    "dev": [
        "build>=0.9.0",
        "ipython",
        "twine",
        "wheel",
    ],
    "bls": [
        "eth-typing>=3.3.0",
        "eth-utils>=2.0.0",
        "py-ecc>=6.0.0",
        "ssz>=0.5.0",
    ],
    "test": [
        "hypothesis>=5,<7",
        "pytest>=7.0.0",
        "pytest-cov>=4.0.0",
        "pytest-timeout>=2.0.0",
        "pytest-xdist>=3.0",
    ],
}


extras_require["dev"] = (
    extras_require["dev"]
    + extras_require["bls"]
    + extras_require["test"]
)

install_requires = extras_require["bls"]

with open("README.md") as readme_file:
    long_description = readme_file.read()

setup(
    name="py-bls-keys",
    version="0.1.0-alpha.1",
    description="BLS12-381 public keys: encodings, aggregation and verification",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Ethereum Foundation",
    author_email="snakecharmers@ethereum.org",
    include_package_data=True,
    install_requires=install_requires,
    python_requires=">=3.8, <4",
    extras_require=extras_require,
    license="MIT",
    zip_safe=False,
    keywords="bls bls12-381 signatures aggregation",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"bls_keys": ["py.typed"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
