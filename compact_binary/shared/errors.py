"""
Error types shared by the bit vector and codec layers.
"""


class DomainError(ValueError):
    """Raised for negative integers and out-of-range indices or lengths."""
