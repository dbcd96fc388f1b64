"""
Installation setup for opcgdb
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("opcgdb/resources/opcgdb.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file), encoding="utf-8")

setuptools.setup(
    name="opcgdb",
    version=config.get("OPCGDB", "version", fallback="1.0.0+fallback"),
    description="One Piece Card Game card list scraper and database generator",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python",
        "Topic :: Database",
    ],
    keywords=[
        "Card Games",
        "Collectible",
        "Database",
        "JSON",
        "One Piece",
        "Scraper",
        "Trading Cards",
    ],
    python_requires=">=3.9",
    include_package_data=True,
    package_data={"opcgdb": ["resources/*.properties"]},
    packages=setuptools.find_packages(include=["opcgdb", "opcgdb.*"]),
    install_requires=project_root.joinpath("requirements.txt")
    .open(encoding="utf-8")
    .readlines()
    if project_root.joinpath("requirements.txt").is_file()
    else [],  # Use the requirements file, if able
    extras_require={
        "test": project_root.joinpath("requirements_test.txt")
        .open(encoding="utf-8")
        .readlines()
        if project_root.joinpath("requirements_test.txt").is_file()
        else [],
    },
    entry_points={"console_scripts": ["opcgdb=opcgdb.__main__:main"]},
)
