"""Core state and persistence layer of the NSS volunteer portal."""

__version__ = "1.0.0"
