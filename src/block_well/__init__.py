"""Functional core of a falling-block puzzle well."""

from .config import WellConfig

__all__ = ["WellConfig"]
