from setuptools import setup, find_packages

setup(
    name="fluentrest",
    version="0.1.0",
    description="Fluent async HTTP request builder over a fetch-style transport",
    author="fluentrest maintainers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "httpx>=0.25.1",
        "structlog>=23.2.0",
        "pydantic>=2.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.11",
)
