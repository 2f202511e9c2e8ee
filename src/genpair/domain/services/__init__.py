#!/usr/bin/env python3

"""Domain services."""

from . import generation

__all__ = [
    "generation",
]
