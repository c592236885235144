"""
Interactive command-line task tracker.

Tasks live in a single JSON file; every change rewrites the whole file.
"""

__version__ = "0.1.0"
