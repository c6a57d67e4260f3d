"""
Pancheck: PAN Number Cleaning and Validation Pipeline.

This package normalizes raw Permanent Account Number (PAN) records,
classifies them against the PAN format and pattern rules, and
summarizes the results of a batch.
"""

from importlib.metadata import version

__version__ = version("pancheck")

__all__ = ["__version__"]
