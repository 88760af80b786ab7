"""Simple and compound interest calculator backend."""

__version__ = "1.0.0"
