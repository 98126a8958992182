# ============================================================================
# KubeNotify - Error Classes
#
# Purpose: Custom exception hierarchy for the package
# Inputs: Error messages and context
# Outputs: Structured exceptions
# Dependencies: None
# Usage: raise WriteError("Failed to post data", index="kubenotify-07-03-2024")
#
# Changelog:
#   2026-10-05: Initial error classes
#   2026-10-09: Split NotifierError into one class per backend step
# ============================================================================

from typing import Optional


class KubeNotifyError(Exception):
    """Base exception for all KubeNotify errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        """
        Initialize error.

        Args:
            message: Error message
            details: Optional detailed error information
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """String representation."""
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class ConfigurationError(KubeNotifyError):
    """Raised when configuration is invalid or missing."""

    pass


class NotifierError(KubeNotifyError):
    """Raised when a notifier fails to deliver an event."""

    def __init__(self, message: str, details: Optional[str] = None, index: Optional[str] = None):
        super().__init__(message, details)
        self.index = index


class ConstructionError(NotifierError):
    """Raised when the client, credentials or request signer cannot be set up."""

    pass


class ExistenceCheckError(NotifierError):
    """Raised when the index existence check fails."""

    pass


class CreateIndexError(NotifierError):
    """Raised when the index cannot be created."""

    pass


class WriteError(NotifierError):
    """Raised when the event document cannot be indexed."""

    pass


class FlushError(NotifierError):
    """Raised when the index flush fails."""

    pass
