#!/usr/bin/env python3

"""Infrastructure layer for technical concerns."""

from . import config, logging

__all__ = [
    "config",
    "logging",
]
