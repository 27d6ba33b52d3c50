"""Custom exception hierarchy for tienda-cli.

All exceptions that cross layer boundaries must inherit from
:class:`TiendaError`.  Raw httpx exceptions must NEVER propagate beyond
the infrastructure layer — they are caught there and re-raised as a
typed subclass defined here.

Hierarchy
---------
TiendaError
├── UsageError
├── ApiError
│   ├── TransportError
│   ├── NetworkError
│   └── InvalidResponseError
└── EnvironmentError
"""

from __future__ import annotations


class TiendaError(Exception):
    """Base exception for all tienda-cli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI boundaries can render a clean message
    without leaking stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(TiendaError):
    """Raised when the command line cannot be resolved to a command."""


# --- Remote API ------------------------------------------------------------

class ApiError(TiendaError):
    """Base class for failures talking to the remote catalog."""


class TransportError(ApiError):
    """Raised when the remote answers with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"Error HTTP: {status_code} - {reason}", hint=hint)
        self.status_code: int = status_code
        self.reason: str = reason


class NetworkError(ApiError):
    """Raised when the request could not be sent (DNS, refused, timeout)."""


class InvalidResponseError(ApiError):
    """Raised when a successful response carries an unusable body."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TiendaError):
    """Raised when a required runtime dependency is not available."""
