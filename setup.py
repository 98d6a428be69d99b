from setuptools import find_packages, setup

setup(
    name="vaultnav",
    version="0.1.0",
    description="Vault navigation - follow wikilinks, backlinks and tags in a markdown vault",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting and interactive picker
        "pyyaml",  # YAML output display
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "vaultnav=vaultnav.cli:main",
        ],
    },
)
