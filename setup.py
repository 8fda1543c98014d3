from setuptools import setup, find_packages

setup(
    name="trunkops",
    version="0.1.0",
    description="Trunk-based development workflows on top of git",
    packages=find_packages(include=["trunkops", "trunkops.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pyfakefs>=5.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "trunkops=trunkops.__main__:main",
        ]
    },
  )
