"""
The generic service client. Every operation of every service runs through ``BaseServiceClient.dispatch``:

1. check that an endpoint provider is set
2. check the required members of the operation, in their declared order
3. resolve the endpoint, and add the operation's host prefix to it
4. serialize the request (which adds the URI path and query string to the endpoint)
5. sign the request and send it through the HTTP client
6. parse the HTTP response into an ``Outcome``

Any failure along the way ends the dispatch with an error ``Outcome``, nothing is raised to the caller and nothing
is retried. Subclasses declare their ``service``, and get three methods per operation of the service generated:
``create_experiment``, ``create_experiment_callable`` and ``create_experiment_async`` for ``CreateExperiment``.
"""
import copy
import logging
from concurrent.futures import Executor, Future
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional

import requests
from botocore import xform_name
from botocore.credentials import Credentials

from clientstack.aws.api import (
    AsyncCallerContext,
    AwsError,
    ErrorKind,
    Outcome,
    RequestContext,
    ServiceRequest,
    ServiceResponse,
    missing_parameter,
)
from clientstack.aws.auth import (
    SessionCredentialsProvider,
    Signer,
    SigningError,
    SigV4Signer,
    StaticCredentialsProvider,
)
from clientstack.aws.configuration import ClientConfiguration
from clientstack.aws.endpoints import DefaultEndpointProvider, EndpointProvider, InvalidEndpointError
from clientstack.aws.protocol.parser import create_parser
from clientstack.aws.protocol.serializer import (
    ProtocolSerializerError,
    RequestSerializerError,
    create_serializer,
)
from clientstack.aws.spec import OperationSpec, ServiceSpec
from clientstack.http import HttpClient, SimpleRequestsClient
from clientstack.utils.executor import WorkerPool

LOG = logging.getLogger(__name__)

# one record per dispatched operation, see clientstack.logging.setup
REQUEST_LOG = logging.getLogger("clientstack.request")

AsyncHandler = Callable[
    ["BaseServiceClient", ServiceRequest, Outcome, Optional[AsyncCallerContext]], None
]


def check_endpoint_provider(
    endpoint_provider: Optional[EndpointProvider], operation_name: str
) -> Optional[AwsError]:
    if endpoint_provider is not None:
        return None
    LOG.error("Unable to call %s: endpoint provider is not initialized", operation_name)
    return AwsError(
        kind=ErrorKind.ENDPOINT_RESOLUTION_FAILURE,
        code="ENDPOINT_RESOLUTION_FAILURE",
        message="Unable to resolve endpoint: endpoint provider is not initialized",
    )


def check_required_members(operation: OperationSpec, request: Mapping[str, Any]) -> Optional[AwsError]:
    """
    Checks that all required members of the operation are set. Only the first missing member is reported.

    :return: an error of kind MISSING_PARAMETER naming the first missing member, or None
    """
    for member in operation.required:
        if member not in request:
            LOG.error("Required field: %s, is not set", member)
            return missing_parameter(member)
    return None


def endpoint_context_parameters(operation: OperationSpec, request: Mapping[str, Any]) -> Dict[str, Any]:
    """Returns the endpoint parameters of the operation which are set in the request, by parameter name."""
    return {
        parameter: request[member]
        for parameter, member in operation.endpoint_context.items()
        if request.get(member) is not None
    }


def _merge_request(request: Optional[Mapping[str, Any]], members: Mapping[str, Any]) -> ServiceRequest:
    if request is None:
        return dict(members)
    if not members:
        return request
    merged = dict(request)
    merged.update(members)
    return merged


class BaseServiceClient:
    service: ClassVar[ServiceSpec]

    config: ClientConfiguration
    endpoint_provider: Optional[EndpointProvider]
    signer: Signer
    http_client: HttpClient
    executor: Executor

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        service = cls.__dict__.get("service")
        if service is None:
            return
        for operation_name in service.operation_names:
            _create_api_methods(cls, operation_name)

    def __init__(
        self,
        config: ClientConfiguration = None,
        credentials: Credentials = None,
        endpoint_provider: EndpointProvider = None,
        signer: Signer = None,
        http_client: HttpClient = None,
    ):
        """
        :param config: the client configuration, defaults to ``ClientConfiguration.from_env()``
        :param credentials: explicit credentials, otherwise they are looked up through the boto3 credential chain
        :param endpoint_provider: resolves the endpoint of each request
        :param signer: signs each request, defaults to SigV4 with the service's signing name
        :param http_client: sends the signed requests
        """
        self.config = config or ClientConfiguration.from_env()

        self.endpoint_provider = endpoint_provider or DefaultEndpointProvider(
            self.service.endpoint_prefix
        )
        self.endpoint_provider.init_built_in_parameters(self.config)

        if signer is None:
            if credentials is not None:
                credentials_provider = StaticCredentialsProvider(credentials)
            else:
                credentials_provider = SessionCredentialsProvider(self.config.profile)
            signer = SigV4Signer(credentials_provider, self.service.signing_name, self.config.region)
        self.signer = signer

        self._owns_http_client = http_client is None
        self.http_client = http_client or SimpleRequestsClient(
            connect_timeout=self.config.connect_timeout,
            request_timeout=self.config.request_timeout,
            verify=self.config.verify_ssl,
        )

        self._owns_executor = self.config.executor is None
        self.executor = self.config.executor or WorkerPool(
            self.config.max_workers, thread_name_prefix=f"{self.service.service_name}-client"
        )

        self._serializer = create_serializer(self.service, user_agent=self.config.user_agent)
        self._parser = create_parser(self.service)

    @property
    def service_client_name(self) -> str:
        return self.service.client_name

    @property
    def operation_names(self) -> List[str]:
        return self.service.operation_names

    def override_endpoint(self, endpoint: str) -> None:
        """Sends all further requests to the given endpoint URL."""
        if self.endpoint_provider is None:
            LOG.error("Unable to override endpoint: endpoint provider is not initialized")
            return
        self.endpoint_provider.override_endpoint(endpoint)

    def dispatch(self, operation_name: str, request: ServiceRequest = None) -> Outcome[ServiceResponse]:
        """
        Invokes the operation on the calling thread.

        :param operation_name: the name of the operation, f.e. ``CreateExperiment``
        :param request: the members of the request
        :return: the outcome of the operation
        :raises OperationNotFoundError: if the service has no such operation
        """
        request = request if request is not None else {}

        context = RequestContext()
        context.service = self.service
        context.operation = self.service.operation_model(operation_name)
        context.region = self.config.region
        context.service_request = request

        outcome = self._dispatch(context)
        self._log_outcome(context, outcome)
        return outcome

    def dispatch_callable(
        self, operation_name: str, request: ServiceRequest = None
    ) -> "Future[Outcome[ServiceResponse]]":
        """
        Submits the operation to the client's executor. The request is copied, so it can be changed by the caller
        once this method returns.

        :return: a future which completes with the outcome of the operation
        :raises RuntimeError: if the executor does not accept tasks anymore
        """
        request_copy = copy.deepcopy(request) if request is not None else {}
        return self.executor.submit(self.dispatch, operation_name, request_copy)

    def dispatch_async(
        self,
        operation_name: str,
        request: ServiceRequest,
        handler: AsyncHandler,
        context: AsyncCallerContext = None,
    ) -> None:
        """
        Submits the operation to the client's executor, and calls the handler with the outcome once it is done.
        The handler receives this client, the original request, the outcome and the given context.

        :raises RuntimeError: if the executor does not accept tasks anymore
        """
        request_copy = copy.deepcopy(request) if request is not None else {}
        self.executor.submit(
            self._run_async, operation_name, request_copy, request, handler, context
        )

    def _run_async(
        self,
        operation_name: str,
        request_copy: ServiceRequest,
        request: ServiceRequest,
        handler: AsyncHandler,
        context: Optional[AsyncCallerContext],
    ) -> None:
        outcome = self.dispatch(operation_name, request_copy)
        try:
            handler(self, request, outcome, context)
        except Exception:
            LOG.exception("Error in handler of %s.%s", self.service.service_name, operation_name)

    def _dispatch(self, context: RequestContext) -> Outcome[ServiceResponse]:
        operation = context.operation
        request = context.service_request

        if error := check_endpoint_provider(self.endpoint_provider, operation.name):
            return Outcome.failure(error)

        if error := check_required_members(operation, request):
            return Outcome.failure(error)

        endpoint_outcome = self.endpoint_provider.resolve_endpoint(
            endpoint_context_parameters(operation, request)
        )
        if not endpoint_outcome.is_success:
            LOG.error(
                "Unable to resolve endpoint of %s: %s", operation.name, endpoint_outcome.error.message
            )
            return Outcome.failure(endpoint_outcome.error)
        endpoint = endpoint_outcome.result
        context.endpoint = endpoint

        if operation.host_prefix and self.config.enable_host_prefix_injection:
            try:
                endpoint.add_prefix_if_missing(operation.host_prefix)
            except InvalidEndpointError as e:
                LOG.error("Unable to add host prefix to endpoint of %s: %s", operation.name, e)
                return Outcome.failure(_invalid_parameter_value(str(e)))

        try:
            aws_request = self._serializer.serialize_to_request(request, operation, endpoint)
        except ProtocolSerializerError as e:
            LOG.error("Unable to serialize request of %s: %s", operation.name, e)
            return Outcome.failure(_invalid_parameter_value(str(e)))
        except RequestSerializerError as e:
            LOG.exception("Unexpected error while serializing request of %s", operation.name)
            return Outcome.failure(_unknown_error(e))

        try:
            self.signer.sign(aws_request)
        except SigningError as e:
            LOG.error("Unable to sign request of %s: %s", operation.name, e)
            return Outcome.failure(
                AwsError(
                    kind=ErrorKind.CLIENT_SIGNING_FAILURE,
                    code="CLIENT_SIGNING_FAILURE",
                    message=str(e),
                )
            )

        try:
            response = self.http_client.request(aws_request.prepare())
        except requests.RequestException as e:
            LOG.debug("Request of %s to %s failed: %s", operation.name, aws_request.url, e)
            return Outcome.failure(
                AwsError(
                    kind=ErrorKind.NETWORK_CONNECTION,
                    code="NETWORK_CONNECTION",
                    message=f"Encountered network error when sending http request: {e}",
                    retryable=True,
                )
            )

        try:
            return self._parser.parse(response, operation)
        except Exception as e:
            LOG.exception("Unexpected error while parsing response of %s", operation.name)
            return Outcome.failure(_unknown_error(e, status_code=response.status_code))

    def _log_outcome(self, context: RequestContext, outcome: Outcome) -> None:
        if not REQUEST_LOG.isEnabledFor(logging.INFO):
            return
        operation = f"{context.service.service_name}.{context.operation.name}"
        if outcome.is_success:
            REQUEST_LOG.info(
                "AWS %s => success",
                operation,
                extra={
                    "operation": operation,
                    "input": context.service_request,
                    "output_type": type(outcome.result).__name__,
                    "output": outcome.result,
                },
            )
        else:
            REQUEST_LOG.info(
                "AWS %s => %s (%s)",
                operation,
                outcome.error.kind.value,
                outcome.error.code,
                extra={
                    "operation": operation,
                    "input": context.service_request,
                    "output_type": outcome.error.code,
                    "output": outcome.error.message,
                },
            )

    def close(self) -> None:
        """Shuts down the executor and closes the HTTP client, if they have been created by this client."""
        if self._owns_executor:
            self.executor.shutdown(wait=True)
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def __repr__(self):
        return f"<{type(self).__name__} region={self.config.region!r}>"


def _invalid_parameter_value(message: str) -> AwsError:
    return AwsError(
        kind=ErrorKind.INVALID_PARAMETER_VALUE,
        code="INVALID_PARAMETER_VALUE",
        message=message,
    )


def _unknown_error(e: Exception, status_code: int = None) -> AwsError:
    return AwsError(
        kind=ErrorKind.UNKNOWN,
        code="UNKNOWN",
        message=str(e),
        status_code=status_code,
    )


def _create_api_methods(cls, operation_name: str) -> None:
    """
    Adds the sync, callable and async method of the given operation to the client class, unless the class defines
    them itself.
    """
    py_name = xform_name(operation_name)

    def _api_call(self, request: ServiceRequest = None, **members) -> Outcome[ServiceResponse]:
        return self.dispatch(operation_name, _merge_request(request, members))

    def _api_call_callable(
        self, request: ServiceRequest = None, **members
    ) -> "Future[Outcome[ServiceResponse]]":
        return self.dispatch_callable(operation_name, _merge_request(request, members))

    def _api_call_async(
        self,
        request: ServiceRequest,
        handler: AsyncHandler,
        context: AsyncCallerContext = None,
    ) -> None:
        self.dispatch_async(operation_name, request, handler, context)

    methods = {
        py_name: (_api_call, f"Invokes ``{operation_name}`` and returns its outcome."),
        f"{py_name}_callable": (
            _api_call_callable,
            f"Invokes ``{operation_name}`` on the executor and returns a future of its outcome.",
        ),
        f"{py_name}_async": (
            _api_call_async,
            f"Invokes ``{operation_name}`` on the executor and passes its outcome to the handler.",
        ),
    }
    for name, (method, doc) in methods.items():
        if name in cls.__dict__:
            continue
        method.__name__ = name
        method.__qualname__ = f"{cls.__name__}.{name}"
        method.__doc__ = doc
        setattr(cls, name, method)
