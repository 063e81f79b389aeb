import dataclasses
import enum
import uuid
from typing import TYPE_CHECKING, Any, Dict, Generic, Mapping, NamedTuple, Optional, TypeVar

if TYPE_CHECKING:
    from clientstack.aws.endpoints import ResolvedEndpoint
    from clientstack.aws.spec import OperationSpec, ServiceSpec

ServiceRequest = Dict[str, Any]
"""A request is a mapping of member name to value. A member counts as set iff its key is present."""

ServiceResponse = Any

T = TypeVar("T")


class ServiceException(Exception):
    """
    An exception that indicates that a service error occurred.
    Outcomes never raise by themselves, a ``ServiceException`` is only raised when a caller asks for the result
    of a failed outcome (see ``Outcome.get_result``).
    Do not use this exception directly (use CommonServiceException instead).
    """

    pass


class CommonServiceException(ServiceException):
    """
    An exception which carries the error code, message and HTTP status of a failed operation, f.e. the
    "Common Errors" of the AWS API references:
    https://docs.aws.amazon.com/AWSSimpleQueueService/latest/APIReference/CommonErrors.html
    """

    def __init__(self, code: str, message: str, status_code: int = 400, sender_fault: bool = False):
        self.code = code
        self.status_code = status_code
        self.sender_fault = sender_fault
        self.message = message
        super().__init__(self.message)


class ErrorKind(enum.Enum):
    MISSING_PARAMETER = "MISSING_PARAMETER"
    ENDPOINT_RESOLUTION_FAILURE = "ENDPOINT_RESOLUTION_FAILURE"
    INVALID_PARAMETER_VALUE = "INVALID_PARAMETER_VALUE"
    CLIENT_SIGNING_FAILURE = "CLIENT_SIGNING_FAILURE"
    NETWORK_CONNECTION = "NETWORK_CONNECTION"
    SERVICE = "SERVICE"
    UNKNOWN = "UNKNOWN"


# errors detected before anything was sent
LOCAL_ERROR_KINDS = (
    ErrorKind.MISSING_PARAMETER,
    ErrorKind.ENDPOINT_RESOLUTION_FAILURE,
    ErrorKind.INVALID_PARAMETER_VALUE,
    ErrorKind.CLIENT_SIGNING_FAILURE,
)


@dataclasses.dataclass(frozen=True)
class AwsError:
    """
    The error half of an ``Outcome``. ``kind`` tells where the error came from, ``code`` is the machine-readable
    error code (the service's error code for ``ErrorKind.SERVICE``), ``message`` the human-readable description.
    """

    kind: ErrorKind
    code: str
    message: str
    status_code: Optional[int] = None
    retryable: bool = False
    request_id: Optional[str] = None

    @property
    def sender_fault(self) -> bool:
        if self.kind in LOCAL_ERROR_KINDS:
            return True
        return self.status_code is not None and 400 <= self.status_code < 500

    def to_exception(self) -> CommonServiceException:
        exception = CommonServiceException(
            code=self.code,
            message=self.message,
            status_code=self.status_code or 400,
            sender_fault=self.sender_fault,
        )
        exception.kind = self.kind
        exception.retryable = self.retryable
        exception.request_id = self.request_id
        return exception


class Outcome(Generic[T]):
    """
    Either the result of a successful operation or an ``AwsError``. Outcomes are values: two outcomes are equal if
    their results (or errors) are equal.
    """

    __slots__ = ("_result", "_error")

    def __init__(self, result: T = None, error: AwsError = None):
        if error is not None and result is not None:
            raise ValueError("an outcome holds either a result or an error")
        self._result = result
        self._error = error

    @classmethod
    def success(cls, result: T) -> "Outcome[T]":
        return cls(result=result)

    @classmethod
    def failure(cls, error: AwsError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def result(self) -> Optional[T]:
        return self._result

    @property
    def error(self) -> Optional[AwsError]:
        return self._error

    def get_result(self) -> T:
        """
        :return: the result of a successful outcome
        :raises CommonServiceException: if the outcome is an error
        """
        if self._error is not None:
            raise self._error.to_exception()
        return self._result

    def __eq__(self, other):
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._result == other._result and self._error == other._error

    def __repr__(self):
        if self._error is not None:
            return f"Outcome(error={self._error!r})"
        return f"Outcome(result={self._result!r})"


def missing_parameter(member: str) -> AwsError:
    return AwsError(
        kind=ErrorKind.MISSING_PARAMETER,
        code="MISSING_PARAMETER",
        message=f"Missing required field [{member}]",
    )


class ServiceOperation(NamedTuple):
    service: str
    operation: str


class AsyncCallerContext:
    """
    Optional caller-supplied context handed back to the handler of an async operation. It carries a unique id
    which callers can use to correlate submissions and completions.
    """

    uuid: str

    def __init__(self, uuid_: str = None, **attributes):
        self.uuid = uuid_ or str(uuid.uuid4())
        for key, value in attributes.items():
            setattr(self, key, value)

    def __repr__(self):
        return f"AsyncCallerContext(uuid={self.uuid!r})"


class RequestContext:
    """
    Holds everything that is known about one dispatch of an operation, filled step by step while the request is
    validated, routed, serialized and sent.
    """

    service: Optional["ServiceSpec"]
    operation: Optional["OperationSpec"]
    region: Optional[str]
    service_request: Optional[Mapping[str, Any]]
    endpoint: Optional["ResolvedEndpoint"]

    def __init__(self) -> None:
        super().__init__()
        self.service = None
        self.operation = None
        self.region = None
        self.service_request = None
        self.endpoint = None

    @property
    def service_operation(self) -> Optional[ServiceOperation]:
        if not self.service or not self.operation:
            return None
        return ServiceOperation(self.service.service_name, self.operation.name)
