from setuptools import find_packages, setup


setup(
    name="argflags",
    version="1.0.0",
    description="Single-pass splitter of command-line tokens into flags and positional arguments",
    author="GAHEOS",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["argflags = argflags.cli:main"]},
)
