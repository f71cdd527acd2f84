import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pystatecu",
    version="0.1.0",
    author="pystatecu developers",
    description="python library for working with StateCU crop pattern and irrigation practice files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    install_requires=[
        "numpy",
        "jinja2",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
