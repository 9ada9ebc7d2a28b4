# setup.py
from setuptools import setup, find_packages

setup(
    name="sable",
    version="0.1.0",
    description="A small Scheme-like interpreter",
    packages=find_packages(include=["sable", "sable.*"]),
    # the standard library ships as Sable source next to the code
    package_data={"sable": ["prelude/*.scm"]},
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["sable = sable.__main__:main"]},
    zip_safe=False,
)
