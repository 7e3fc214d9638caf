# setup.py
from setuptools import setup, find_packages

setup(
    name="lispir",
    version="0.1.0",
    description="A minimal tree-walking interpreter for a small Lisp",
    packages=find_packages(include=["lispir", "lispir.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6.90"],
    },
    entry_points={
        "console_scripts": ["lispir=lispir.__main__:main"],
    },
    zip_safe=False,
)
