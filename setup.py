from setuptools import setup, find_packages

setup(
    name="salesboard",
    version="1.2.0",
    packages=find_packages(include=["salesboard", "salesboard.*"]),
    install_requires=[
        "pandas>=2.0",
        "requests>=2.31",
        "pyyaml>=6.0",
        "python-dotenv>=1.0",
        "APScheduler>=3.10,<4",
        "google-generativeai>=0.8",
        "google-api-core>=2.11",
    ],
    extras_require={
        "openai": ["openai>=1.30"],
        "ui": ["streamlit>=1.37"],
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": [
            "salesboard=salesboard.cli:main",
        ],
    },
    python_requires=">=3.10",
    description="Live sales-performance dashboard with AI coaching advice",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ]
)
