from setuptools import setup, find_packages
import os

if os.path.exists("mocklinux/version.txt"):
    with open("mocklinux/version.txt") as f:
        version = f.read().strip()
else:
    version = "0.0.1"

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="mocklinux",
    version=version,
    description="Run a command with the Maestro kernel reporting itself as Linux",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"mocklinux": ["version.txt"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0",
        "coloredlogs",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "mocklinux=mocklinux.cli:main",
        ],
    },
)
