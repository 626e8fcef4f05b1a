from setuptools import setup, find_packages

setup(
    name="connect4_engine",
    version="0.1.0",
    description="Bitboard Connect Four with a time-bounded alpha-beta engine",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.17",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4-play=connect4_engine.play:main",
        ],
    },
)
