from .core import (
    AsyncCallerContext,
    AwsError,
    CommonServiceException,
    ErrorKind,
    Outcome,
    RequestContext,
    ServiceException,
    ServiceRequest,
    ServiceResponse,
    missing_parameter,
)

__all__ = [
    "AsyncCallerContext",
    "AwsError",
    "CommonServiceException",
    "ErrorKind",
    "Outcome",
    "RequestContext",
    "ServiceException",
    "ServiceRequest",
    "ServiceResponse",
    "missing_parameter",
]
