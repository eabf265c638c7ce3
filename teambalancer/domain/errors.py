"""Error taxonomy shared by the use cases and adapters."""

from enum import Enum


class UpstreamFailure(str, Enum):
    """Classification of a data-provider failure."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER_FAULT = "server_fault"

    @classmethod
    def from_status(cls, status_code: int) -> "UpstreamFailure":
        return {
            400: cls.BAD_REQUEST,
            401: cls.UNAUTHORIZED,
            403: cls.FORBIDDEN,
            404: cls.NOT_FOUND,
            429: cls.RATE_LIMITED,
        }.get(status_code, cls.SERVER_FAULT)


class OptimizerFault(str, Enum):
    """Classification of an optimizer failure."""

    TIMEOUT = "timeout"
    UNAVAILABLE = "unavailable"
    BAD_RESPONSE = "bad_response"


class BalancerError(Exception):
    """Base class for errors raised by the balancer core."""


class ValidationError(BalancerError):
    """Caller input is outside the accepted contract."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class UpstreamError(BalancerError):
    """The data provider rejected or could not answer a required read."""

    def __init__(self, status_code: int, message: str, failure: UpstreamFailure | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.failure = failure or UpstreamFailure.from_status(status_code)


class OptimizerError(BalancerError):
    """The external optimizer timed out, was unreachable or answered garbage."""

    def __init__(self, kind: OptimizerFault, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
