from setuptools import find_packages, setup
from pathlib import Path

setup(
    name="csv_annotator",
    version=Path("./csv_annotator/VERSION").read_text().strip(),
    description="Annotate the rows of a CSV file from the terminal",
    packages=find_packages(include=["csv_annotator", "csv_annotator.*"]),
    package_data={"csv_annotator": ["VERSION"]},
    python_requires=">=3.8",
    install_requires=[
        "textual>=1.0",
        "rich",
        "easydict",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["csv_annotator=csv_annotator.cli:main"],
    },
)
