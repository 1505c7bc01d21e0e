from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="netalgo",
    version="0.1.0",
    description="Classic graph algorithms on dense integer-id graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"netalgo": ["schemas/*.json"]},
    python_requires=">=3.10",
    install_requires=["networkx", "numpy", "pyyaml", "jsonschema"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["netalgo=netalgo.cli:main"]},
)
