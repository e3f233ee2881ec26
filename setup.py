from setuptools import setup, find_packages

setup(
    name="connect4-engine",
    version="0.2.0",
    description="Connect Four rules engine with a CLI and a Gymnasium environment",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4=connect4.interfaces.cli:main",
        ],
    },
)
