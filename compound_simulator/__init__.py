"""Compound interest simulator backend."""

__version__ = "0.1.0"
