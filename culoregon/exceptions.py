"""Custom exception hierarchy for the CUL Oregon application layer."""


class CulOregonError(Exception):
    """Base class for all application specific errors."""


class CulParserError(CulOregonError):
    """Raised when a dongle line cannot be routed or parsed."""
