"""Utility functions for running external processes and working with tagsets."""

from . import system, tagsets

__all__ = ["system", "tagsets"]
