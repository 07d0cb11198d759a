""" slip13 build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import slip13

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=slip13.name,
    version=slip13.__version__,
    license=slip13.__license__,
    author=slip13.__author__,
    author_email=slip13.__author_email__,
    description="SLIP-0013 deterministic identity keys over SLIP-0010 derivation",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords=(
        "bitcoin cryptography elliptic-curves secp256k1 nist256p1 "
        "slip10 slip13 bip32 bip39 hierarchical-deterministic identity"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
