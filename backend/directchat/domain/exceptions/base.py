"""
DomainError - Common root for every recoverable business failure.
"""


class DomainError(Exception):
    """Base class carrying a stable, machine-readable error code."""

    code: str = "domain_error"

    def __init__(self, message: str = "Domain error"):
        super().__init__(message)
        self.message = message
