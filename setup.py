#!/usr/bin/env python

from setuptools import setup


VERSION = (0, 1, 0, "")


setup(
    name="docmodel",
    description="runtime schema descriptions for document storage",
    packages=["docmodel"],
    version='.'.join(filter(None, map(str, VERSION))),
    python_requires='>=3.9',
    install_requires=['pydantic>=2'],
    extras_require={'test': ['pytest']},
)
