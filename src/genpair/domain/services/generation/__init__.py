#!/usr/bin/env python3

"""Header/source generation services."""

from .file_pair_generator import FilePairGenerator
from .templates import render_header, render_source

__all__ = [
    "FilePairGenerator",
    "render_header",
    "render_source",
]
