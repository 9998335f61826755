# setup.py
from setuptools import setup, find_packages

setup(
    name="ogx",
    version="0.1.0",
    description="Inspect OpenGraph metadata of a web page",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "pydantic>=2.5",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["ogx=ogx.cli:cli"],
    },
    python_requires=">=3.11",
)
