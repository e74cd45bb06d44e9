#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: munsellab/__init__.py

__version__ = "v0.1.0"

from munsellab.core.pipeline import ColorDescription, RGBRangeError, convert

__all__ = ["ColorDescription", "RGBRangeError", "convert", "__version__"]
