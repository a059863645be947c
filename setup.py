from setuptools import find_packages, setup

setup(
    name="lsid",
    version="0.3.0",
    description="lsid - list file metadata and content identifiers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # Command-line interface
        "pydantic>=2",  # Display configuration model
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            # Primary CLI name plus personalities selected by invocation name
            "lsid=lsid.cli:main",
            "lsr=lsid.cli:main",
            "lt=lsid.cli:main",
            "lr=lsid.cli:main",
            "ll=lsid.cli:main",
            "llr=lsid.cli:main",
        ],
    },
)
