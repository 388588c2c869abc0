"""
Errors Module
Exception types raised by the DOM differ.
"""


class DOMDiffError(Exception):
    """Base exception for errors during DOM diffing."""
    pass


class MalformedNodeError(DOMDiffError):
    """A node of an unexpected kind reached the differ or the marker."""
    pass


class PayloadTypeError(DOMDiffError, TypeError):
    """A text or comment node carries a payload that is not a plain string."""
    pass


class MarkerError(DOMDiffError):
    """A change marker could not be placed in the tree."""
    pass


class ConfigError(DOMDiffError, ValueError):
    """Invalid differ configuration."""
    pass
