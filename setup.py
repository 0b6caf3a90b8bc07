""" lnmsg build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import lnmsg

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=lnmsg.name,
    version=lnmsg.__version__,
    license=lnmsg.__license__,
    author=lnmsg.__author__,
    author_email=lnmsg.__author_email__,
    description="Lightning Network message signing with zbase32 signatures",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["btclib>=2023.2.0,<2024"],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "tests": ["pytest"],
    },
    keywords=(
        "bitcoin lightning cryptography elliptic-curves ecdsa "
        "message-signing zbase32 signmessage checkmessage"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
