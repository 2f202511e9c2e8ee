#!/usr/bin/env python3

"""Domain layer: models, errors and generation services."""

from . import errors, models, services

__all__ = [
    "errors",
    "models",
    "services",
]
