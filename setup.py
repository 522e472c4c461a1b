# setup.py
from setuptools import setup, find_packages

setup(
    name="paren",
    version="0.1.0",
    description="A small prefix-notation expression language with a tree-walking evaluator",
    packages=find_packages(include=["paren", "paren.*"]),
    python_requires=">=3.11",
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["paren=paren.__main__:main"]},
    zip_safe=False,
)
