
from setuptools import setup, find_packages

setup(
    name="mancala_search",
    version="0.1",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["mancala-search=mancala_search.cli:main"],
    },
)
