from setuptools import setup, find_packages

setup(
    name="libfinder",
    version="0.1.0",
    packages=find_packages(include=["libfinder", "libfinder.*"]),
    install_requires=[
        "click",
        "pyyaml",
        "structlog",
        "pydantic>=2",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "libfinder = libfinder.cli.main:main",
        ],
    },
)
