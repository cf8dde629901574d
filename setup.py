"""Setup configuration for the StackShop catalog browser package."""

from setuptools import setup, find_packages

setup(
    name="stackshop-browser",
    version="1.0.0",
    description="Catalog browser with URL-persisted search, category filters and pagination",
    author="",
    author_email="",
    packages=find_packages(include=["config", "config.*", "src", "src.*", "app", "app.*", "scripts"]),
    python_requires=">=3.11",
    install_requires=[
        "httpx>=0.26.0",
        "pydantic>=2.5.0",
        "streamlit>=1.50.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "stackshop-browse=scripts.browse_catalog:main",
        ],
    },
)
