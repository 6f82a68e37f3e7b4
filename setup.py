from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="spgraph",
    version="0.1.0",
    description="Priority queue, sparse/dense graphs and single-source shortest paths.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.9",
    install_requires=["networkx"],
    extras_require={"test": ["pytest", "networkx"]},
    tests_require=["pytest", "networkx"],
)
