from setuptools import setup, find_packages
from os import path
from io import open

setup_dir = path.abspath(path.dirname(__file__))
with open(path.join(setup_dir, 'README.md'),
          encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name="dfa_tools",
    version="0.1",
    packages=find_packages(include=["dfa_tools", "dfa_tools.*"]),
    package_data={
        "dfa_tools.automata": ["builtin/*.dfa"]
    },
    python_requires=">=3.9",

    install_requires=[
        "numpy>=1.22"
    ],
    extras_require={
        "test": ["pytest"]
    },

    license="MIT",
    description="""Some tools for describing deterministic finite automata
    and checking which words they accept""",

    long_description=long_description,
    long_description_content_type="text/markdown"
)
