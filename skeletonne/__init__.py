"""Skeletonne — skeleton loader layout engine and code generator."""

__version__ = "0.1.0"
