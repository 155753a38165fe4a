# setup.py
from setuptools import setup, find_packages

setup(
    name="codebake",
    version="0.1.0",
    description="A small lisp for baking data through recipes of operations",
    packages=find_packages(include=["codebake", "codebake.*"]),
    package_data={"codebake": ["prelude/*.cb"]},
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["codebake=codebake.repl:main"]},
    zip_safe=False,
)
