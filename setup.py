from setuptools import find_packages, setup

setup(
    name="autolink",
    version="0.1.0",
    description="Automatic wikilink insertion for Markdown vaults",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output models
        "typer",  # CLI
        "click",  # Usage errors caught in main (used directly alongside typer)
        "rich",  # Terminal formatting
        "PyYAML",  # Frontmatter parsing and YAML output
        "regex",  # Unicode script classes for CJK/Hangul scanning
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "autolink=autolink.cli:main",
        ],
    },
)
