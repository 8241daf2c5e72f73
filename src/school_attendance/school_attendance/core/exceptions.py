class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request input is missing or invalid."""


class ScopeError(DomainError):
    """Raised when the district/school/email scope cannot be resolved."""


class ConfigurationError(DomainError):
    """Raised when a required upstream endpoint is not configured."""


class UpstreamError(DomainError):
    """Raised when the upstream data service fails or answers non-2xx."""

    def __init__(self, message: str, *, status_code: int = 502, body: str = "", transport: bool = False):
        super().__init__(message)
        self.status_code = int(status_code)
        self.body = body
        self.transport = transport
