from setuptools import setup, find_packages

setup(
    name="pushover-sdk",
    version="0.1.0",
    description="Python SDK and CLI for the Pushover notification API",
    author="Pushover SDK Team",
    packages=find_packages(include=["pushover_sdk", "pushover_sdk.*"]),
    install_requires=[
        "httpx>=0.25.1",
        "pydantic>=2.5.0",
        "structlog>=23.2.0",
        "click>=8.1.7",
        "rich>=13.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pushover=pushover_sdk.cli:cli",
        ],
    },
    python_requires=">=3.10",
)
