"""
Request serializers of the service clients. A serializer takes the request of an operation (a dict of member names
to values) and turns it into a ``botocore.awsrequest.AWSRequest`` for the protocol of the service:

- ``rest-json``: members are distributed to the URI path, the query string, headers and a JSON body
- ``json``: every member goes to the JSON body, the operation is selected with the ``X-Amz-Target`` header
- ``ec2``: every member is flattened into a form-encoded body next to ``Action`` and ``Version``

The URI path and query string are added to the ``ResolvedEndpoint`` of the dispatch, which is therefore modified
by the serializer. The request dict is never modified.
"""
import abc
import base64
import functools
import json
import logging
from datetime import date, datetime
from email.utils import formatdate
from typing import Any, Dict, List, Tuple

from botocore.awsrequest import AWSRequest
from botocore.serialize import ISO8601, ISO8601_MICRO
from botocore.utils import parse_to_aware_datetime, percent_encode_sequence

from clientstack.aws.api import ServiceRequest
from clientstack.aws.endpoints import ResolvedEndpoint
from clientstack.aws.spec import OperationSpec, ServiceProtocol, ServiceSpec
from clientstack.constants import (
    APPLICATION_AMZ_JSON_1_1,
    APPLICATION_JSON,
    APPLICATION_X_WWW_FORM_URLENCODED,
    HEADER_AMZ_TARGET,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
)
from clientstack.utils.json import CustomEncoder, timestamp_seconds
from clientstack.utils.strings import first_char_to_upper, to_bytes

LOG = logging.getLogger(__name__)


class RequestSerializerError(Exception):
    """
    Error which is thrown if the request serialization fails.
    Super class of all exceptions raised by the serializer.
    """

    pass


class UnknownSerializerError(RequestSerializerError):
    """
    Error which indicates an issue in the serializer itself rather than in the serialized request.
    """

    pass


class ProtocolSerializerError(RequestSerializerError):
    """
    Error which indicates that the request contains values which cannot be serialized for the operation,
    f.e. an empty path parameter.
    """

    pass


def _handle_exceptions(func):
    """
    Decorator which ensures that all exceptions raised by the public methods of the serializer are instances of
    RequestSerializerError.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RequestSerializerError:
            raise
        except Exception as e:
            raise UnknownSerializerError(
                "An unknown error occurred when trying to serialize the request."
            ) from e

    return wrapper


class RequestSerializer(abc.ABC):
    """
    Base class of the protocol-specific serializers, with the value conversions that all of them share.
    """

    DEFAULT_ENCODING = "utf-8"

    service: ServiceSpec
    user_agent: str

    def __init__(self, service: ServiceSpec, user_agent: str = None):
        self.service = service
        self.user_agent = user_agent

    @_handle_exceptions
    def serialize_to_request(
        self, request: ServiceRequest, operation: OperationSpec, endpoint: ResolvedEndpoint
    ) -> AWSRequest:
        """
        Serializes the given request of the operation.

        :param request: the request members
        :param operation: the operation to invoke
        :param endpoint: the resolved endpoint of this dispatch, receives path and query string
        :return: an unsigned AWSRequest
        :raises RequestSerializerError: if the request cannot be serialized
        """
        headers: Dict[str, str] = {}
        if self.user_agent:
            headers[HEADER_USER_AGENT] = self.user_agent

        body = self._serialize_request(request, operation, endpoint, headers)

        aws_request = AWSRequest(
            method=operation.http_method,
            url=endpoint.url,
            headers=headers,
            data=body,
        )
        aws_request.context["operation_name"] = operation.name
        LOG.debug(
            "Serialized %s.%s to %s %s",
            self.service.service_name,
            operation.name,
            operation.http_method,
            aws_request.url,
        )
        return aws_request

    @abc.abstractmethod
    def _serialize_request(
        self,
        request: ServiceRequest,
        operation: OperationSpec,
        endpoint: ResolvedEndpoint,
        headers: Dict[str, str],
    ) -> bytes:
        raise NotImplementedError

    # Some extra utility methods subclasses can use.

    @staticmethod
    def _timestamp_iso8601(value: Any) -> str:
        if isinstance(value, date) and not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day)
        value = parse_to_aware_datetime(value)
        if value.microsecond > 0:
            timestamp_format = ISO8601_MICRO
        else:
            timestamp_format = ISO8601
        return value.strftime(timestamp_format)

    @staticmethod
    def _timestamp_rfc822(value: Any) -> str:
        if isinstance(value, (datetime, date)):
            value = timestamp_seconds(value)
        return formatdate(value, usegmt=True)

    def _get_base64(self, value: Any) -> str:
        value = to_bytes(value, self.DEFAULT_ENCODING)
        return base64.b64encode(value).strip().decode(self.DEFAULT_ENCODING)

    def _encode_json(self, document: Any) -> bytes:
        return json.dumps(document, cls=CustomEncoder, separators=(",", ":")).encode(
            self.DEFAULT_ENCODING
        )


class BaseRestRequestSerializer(RequestSerializer, abc.ABC):
    """
    Distributes the members to the URI path, query string and headers. The remaining members are serialized by
    the subclass into the body.
    """

    def _serialize_request(
        self,
        request: ServiceRequest,
        operation: OperationSpec,
        endpoint: ResolvedEndpoint,
        headers: Dict[str, str],
    ) -> bytes:
        self._serialize_path(request, operation, endpoint)

        header_members = dict(self.service.headers)
        header_members.update(operation.headers)

        body_params = {}
        for name, value in request.items():
            if name in operation.path_labels:
                continue
            if name in operation.query:
                for key, query_value in self._serialize_query_value(operation.query[name], value):
                    endpoint.add_query_parameter(key, query_value)
            elif name in header_members:
                if value is not None:
                    headers[header_members[name]] = self._convert_header_value(value)
            else:
                body_params[name] = value

        return self._serialize_body_params(body_params, headers)

    def _serialize_path(
        self, request: ServiceRequest, operation: OperationSpec, endpoint: ResolvedEndpoint
    ) -> None:
        for text, is_label in operation.path_segments:
            if not is_label:
                endpoint.add_path_segments(text)
                continue
            value = request.get(text)
            if value is None or value == "":
                raise ProtocolSerializerError(
                    f"Path parameter [{text}] of {operation.name} must not be empty"
                )
            endpoint.add_path_segment(self._convert_scalar(value))

    def _serialize_query_value(self, key: str, value: Any) -> List[Tuple[str, str]]:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [(key, self._convert_scalar(item)) for item in value]
        if isinstance(value, dict):
            # maps in the query string are flattened to their entries
            result = []
            for map_key, map_value in value.items():
                result.extend(self._serialize_query_value(map_key, map_value))
            return result
        return [(key, self._convert_scalar(value))]

    def _convert_header_value(self, value: Any) -> str:
        if isinstance(value, (datetime, date)):
            return self._timestamp_rfc822(value)
        if isinstance(value, (list, tuple)):
            return ",".join(self._convert_scalar(item) for item in value)
        return self._convert_scalar(value)

    def _convert_scalar(self, value: Any) -> str:
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (datetime, date)):
            return self._timestamp_iso8601(value)
        if isinstance(value, (bytes, bytearray)):
            return self._get_base64(value)
        return str(value)

    @abc.abstractmethod
    def _serialize_body_params(self, params: dict, headers: Dict[str, str]) -> bytes:
        raise NotImplementedError


class RestJSONRequestSerializer(BaseRestRequestSerializer):
    """Serializes the body members as JSON document, an operation without body members sends no body."""

    def _serialize_body_params(self, params: dict, headers: Dict[str, str]) -> bytes:
        if not params:
            return b""
        headers[HEADER_CONTENT_TYPE] = APPLICATION_JSON
        return self._encode_json(params)


class JSONRequestSerializer(RequestSerializer):
    """
    Serializer of the ``json`` protocol (``awsJson1_1``). All operations are POSTs to the root path.
    """

    def _serialize_request(
        self,
        request: ServiceRequest,
        operation: OperationSpec,
        endpoint: ResolvedEndpoint,
        headers: Dict[str, str],
    ) -> bytes:
        endpoint.add_path_segments("/")
        headers[HEADER_AMZ_TARGET] = f"{self.service.target_prefix}.{operation.name}"
        headers[HEADER_CONTENT_TYPE] = (
            APPLICATION_AMZ_JSON_1_1
            if self.service.json_version == "1.1"
            else f"application/x-amz-json-{self.service.json_version}"
        )
        return self._encode_json(request or {})


class EC2RequestSerializer(RequestSerializer):
    """
    Serializer of the ``ec2`` protocol. Lists are flattened to ``Name.1``, ``Name.2``, ..., structures to
    ``Name.Member``, both with the first character of each name in upper case.
    """

    def _serialize_request(
        self,
        request: ServiceRequest,
        operation: OperationSpec,
        endpoint: ResolvedEndpoint,
        headers: Dict[str, str],
    ) -> bytes:
        endpoint.add_path_segments("/")
        params: Dict[str, str] = {
            "Action": operation.name,
            "Version": self.service.api_version,
        }
        for name, value in request.items():
            self._serialize(params, value, first_char_to_upper(name))

        headers[HEADER_CONTENT_TYPE] = APPLICATION_X_WWW_FORM_URLENCODED
        return percent_encode_sequence(params).encode(self.DEFAULT_ENCODING)

    def _serialize(self, params: Dict[str, str], value: Any, prefix: str) -> None:
        if value is None:
            return
        if isinstance(value, dict):
            for key, member_value in value.items():
                self._serialize(params, member_value, f"{prefix}.{first_char_to_upper(key)}")
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value, start=1):
                self._serialize(params, item, f"{prefix}.{index}")
        elif isinstance(value, bool):
            params[prefix] = str(value).lower()
        elif isinstance(value, (datetime, date)):
            params[prefix] = self._timestamp_iso8601(value)
        elif isinstance(value, (bytes, bytearray)):
            params[prefix] = self._get_base64(value)
        else:
            params[prefix] = str(value)


def create_serializer(service: ServiceSpec, user_agent: str = None) -> RequestSerializer:
    """
    Creates the right serializer for the given service.

    :param service: to create the serializer for
    :param user_agent: the User-Agent header sent with every request
    :return: RequestSerializer which can handle the protocol of the service
    """
    protocol_specific_serializers = {
        ServiceProtocol.REST_JSON: RestJSONRequestSerializer,
        ServiceProtocol.JSON: JSONRequestSerializer,
        ServiceProtocol.EC2: EC2RequestSerializer,
    }
    return protocol_specific_serializers[service.protocol](service, user_agent=user_agent)
