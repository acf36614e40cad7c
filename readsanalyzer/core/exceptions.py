"""
ReadsAnalyzer v0.1.0

Exceptions raised by the read processors.

All errors are precondition violations on already-ingested state and are
reported to the caller as-is.

Author: ReadsAnalyzer Development Team
License: MIT
"""


class ReadsAnalyzerError(Exception):
    """Base class for read processor errors."""
    pass


class UnknownKeyError(ReadsAnalyzerError, KeyError):
    """Raised when querying a k-mer or sequence that was never observed."""

    def __init__(self, key: str, kind: str = "sequence"):
        self.key = key
        self.kind = kind
        super().__init__(f"Unknown {kind}: {key!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message
        return self.args[0]


class EmptyTableError(ReadsAnalyzerError, ValueError):
    """Raised when a distribution is requested from an empty k-mer table."""
    pass


class EmptyGraphError(ReadsAnalyzerError, ValueError):
    """Raised when an overlap graph query needs at least one sequence or edge."""
    pass


class EmptyAssemblyError(ReadsAnalyzerError, ValueError):
    """Raised when the layout path has no edges to assemble."""
    pass


__all__ = [
    "ReadsAnalyzerError",
    "UnknownKeyError",
    "EmptyTableError",
    "EmptyGraphError",
    "EmptyAssemblyError",
]
