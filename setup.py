from setuptools import setup, find_namespace_packages

setup(
    name="percentile-engine",
    version="0.1.0",
    description="Check resolution and domain modifier synthesis for a d100 roleplaying ruleset",
    author="Samuel",
    python_requires=">=3.11",
    packages=find_namespace_packages(include=["src", "src.*"]),
    install_requires=[
        "jsonschema>=4.20.0",
        "colorama>=0.4.6",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.12.0",
            "mypy>=1.7.0",
            "pylint>=3.0.0",
        ]
    },
)
