# setup.py
from setuptools import setup, find_packages

setup(
    name="lang1",
    version="0.1.0",
    description="A minimal interactive S-expression interpreter",
    packages=find_packages(include=["lang1", "lang1.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor>=2.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lang1=lang1.__main__:main"],
    },
    zip_safe=False,
)
