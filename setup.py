#!/usr/bin/env python
"""Legacy install shim for cheshire-cat-sdk.

Metadata, dependencies and the ``src/`` package layout are declared in
pyproject.toml; ``setup()`` reads them from there.
"""

from setuptools import setup

setup()
