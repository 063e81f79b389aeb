import dataclasses
import importlib
import re
from functools import cached_property, lru_cache
from typing import Any, Callable, Dict, Generator, List, Mapping, Optional, Tuple

ServiceName = str

_LABEL_REGEX = re.compile(r"\{([A-Za-z0-9_]+)}")


class ServiceProtocol(str):
    REST_JSON = "rest-json"
    JSON = "json"
    EC2 = "ec2"


class HttpMethod(str):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclasses.dataclass(frozen=True)
class OperationSpec:
    """
    Describes how one operation is dispatched: the HTTP method, the request URI (with ``{Member}`` labels that are
    filled from the request), the members that have to be set before anything is sent (in the order in which they
    are checked), an optional host prefix, and the members that are sent in the query string or as headers.
    Members which are neither path labels, query nor header members are sent in the body.
    """

    name: str
    http_method: str = HttpMethod.POST
    request_uri: str = "/"
    required: Tuple[str, ...] = ()
    host_prefix: Optional[str] = None
    query: Mapping[str, str] = dataclasses.field(default_factory=dict)
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)
    endpoint_context: Mapping[str, str] = dataclasses.field(default_factory=dict)
    """Endpoint parameters (by ``EndpointParameters`` field name) which are taken from request members."""
    output: Optional[Callable[[Dict[str, Any]], Any]] = dataclasses.field(
        default=None, compare=False
    )

    @cached_property
    def path_labels(self) -> List[str]:
        return _LABEL_REGEX.findall(self.request_uri)

    @cached_property
    def path_segments(self) -> List[Tuple[str, bool]]:
        """
        Splits the request URI into a list of ``(text, is_label)`` tuples, f.e. ``/projects/{Project}/features``
        turns into ``[("/projects/", False), ("Project", True), ("/features", False)]``.
        """
        result = []
        position = 0
        for match in _LABEL_REGEX.finditer(self.request_uri):
            if match.start() > position:
                result.append((self.request_uri[position : match.start()], False))
            result.append((match.group(1), True))
            position = match.end()
        if position < len(self.request_uri):
            result.append((self.request_uri[position:], False))
        return result


@dataclasses.dataclass(frozen=True)
class ServiceSpec:
    """
    The static description of one AWS service as far as the client is concerned.
    """

    service_name: ServiceName
    client_name: str
    protocol: str
    endpoint_prefix: str
    signing_name: str
    api_version: str
    operations: Dict[str, OperationSpec]
    target_prefix: Optional[str] = None
    json_version: str = "1.1"
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)
    """Members which are sent as header in every operation that has them (f.e. WorkDocs' AuthenticationToken)."""

    @property
    def operation_names(self) -> List[str]:
        return list(self.operations.keys())

    def operation_model(self, operation_name: str) -> OperationSpec:
        try:
            return self.operations[operation_name]
        except KeyError:
            raise OperationNotFoundError(self.service_name, operation_name) from None


class OperationNotFoundError(KeyError):
    def __init__(self, service_name: str, operation_name: str):
        super().__init__(f"{service_name} has no operation {operation_name}")
        self.service_name = service_name
        self.operation_name = operation_name


def operation(
    name: str,
    http_method: str,
    request_uri: str,
    required: Tuple[str, ...] = None,
    query: Mapping[str, str] = None,
    headers: Mapping[str, str] = None,
    host_prefix: str = None,
    endpoint_context: Mapping[str, str] = None,
    output: Callable[[Dict[str, Any]], Any] = None,
) -> OperationSpec:
    """
    Shorthand for REST operations. Unless given explicitly, the required members are the path labels (in URI
    order), followed by nothing else.
    """
    if required is None:
        required = tuple(_LABEL_REGEX.findall(request_uri))
    return OperationSpec(
        name=name,
        http_method=http_method,
        request_uri=request_uri,
        required=tuple(required),
        host_prefix=host_prefix,
        query=dict(query or {}),
        headers=dict(headers or {}),
        endpoint_context=dict(endpoint_context or {}),
        output=output,
    )


def rpc_operations(*names: str) -> Dict[str, OperationSpec]:
    """Operations of RPC-style protocols (json, ec2), which are all POSTs to ``/``."""
    return {name: OperationSpec(name=name) for name in names}


def index_operations(*operations: OperationSpec) -> Dict[str, OperationSpec]:
    return {op.name: op for op in operations}


# maps the service name to the module that defines ``SERVICE`` and the client class
SERVICE_MODULES: Dict[ServiceName, str] = {
    "ds": "clientstack.aws.services.directory_service",
    "ec2": "clientstack.aws.services.ec2",
    "evidently": "clientstack.aws.services.evidently",
    "personalize": "clientstack.aws.services.personalize",
    "pinpoint-email": "clientstack.aws.services.pinpoint_email",
    "workdocs": "clientstack.aws.services.workdocs",
    "workspaces": "clientstack.aws.services.workspaces",
}


@lru_cache(maxsize=32)
def load_service(service: ServiceName) -> ServiceSpec:
    """
    For example: load_service("evidently")

    :raises UnknownServiceError: if there is no description for the given service
    """
    try:
        module_name = SERVICE_MODULES[service]
    except KeyError:
        raise UnknownServiceError(service) from None
    return importlib.import_module(module_name).SERVICE


def list_services() -> List[ServiceSpec]:
    return [load_service(service) for service in SERVICE_MODULES]


def iterate_service_operations() -> Generator[Tuple[ServiceSpec, OperationSpec], None, None]:
    """
    Returns one record per operation of all known services, where the first item is the service the operation
    belongs to, and the second is the operation.

    :return: an iterable
    """
    for service in list_services():
        for op_name in service.operation_names:
            yield service, service.operation_model(op_name)


class UnknownServiceError(ValueError):
    def __init__(self, service_name: str):
        super().__init__(
            f"Unknown service {service_name!r}, known services are {sorted(SERVICE_MODULES)}"
        )
        self.service_name = service_name
