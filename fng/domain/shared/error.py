"""Error hierarchy for FNG.

Error layers:
- FNGError: Base class for all FNG errors
- InfrastructureError: Upstream, storage and push failures

Any primary-source failure is recovered locally (by trying the backup mirror).
Everything else aborts the pipeline run and surfaces to the trigger.
"""


class FNGError(Exception):
    """Base class for all FNG errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Infrastructure Errors (system-level failures)
# =============================================================================


class InfrastructureError(FNGError):
    """Base class for infrastructure/system errors."""


class FetchError(InfrastructureError):
    """Upstream fetch failed: network, timeout, HTTP status, body or payload shape."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message, code="FETCH_FAILED")
        self.url = url


class PersistenceError(InfrastructureError):
    """Reading store is unreachable or rejected the write."""


class PublishError(InfrastructureError):
    """Push transport failed to accept the broadcast."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
