#!/usr/bin/env python3

"""Domain models for genpair."""

from .generation_request import GenerationRequest, Style, ascii_upper

__all__ = [
    "GenerationRequest",
    "Style",
    "ascii_upper",
]
