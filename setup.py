# setup.py
from setuptools import setup, find_packages

setup(
    name="onosendai",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pyyaml",
        "typer",
        "rich",
        "cryptography",
        "pyasn1",
        "pyasn1-modules",
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "onosendai = onosendai.cli.main:main",
        ]
    },
)
