"""Exception hierarchy for textsim."""


class TextSimError(Exception):
    """Base class for all textsim errors."""


class AlgorithmError(TextSimError, ValueError):
    """Raised when an algorithm name is not recognized."""


class ValidationError(TextSimError, ValueError):
    """Raised when a numeric parameter is out of its valid range."""


__all__ = ["TextSimError", "AlgorithmError", "ValidationError"]
