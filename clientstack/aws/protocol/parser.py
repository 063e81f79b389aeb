"""
Response parsers of the service clients. The response metadata and error responses are parsed with botocore's
protocol parsers (which do not need a service model for that), the success documents are decoded here: JSON
documents as they are, EC2 XML documents with ``xmltodict``.
"""
import json
import logging
from typing import Any, Dict, Optional

import xmltodict
from botocore.awsrequest import HeadersDict
from botocore.parsers import ResponseParserError, ResponseParserFactory

from clientstack.aws.api import AwsError, ErrorKind, Outcome, ServiceResponse
from clientstack.aws.spec import OperationSpec, ServiceProtocol, ServiceSpec
from clientstack.http import Response
from clientstack.utils.strings import first_char_to_upper, to_str

LOG = logging.getLogger(__name__)

THROTTLING_ERROR_CODES = {
    "Throttling",
    "ThrottlingException",
    "ThrottledException",
    "RequestThrottledException",
    "TooManyRequestsException",
    "ProvisionedThroughputExceededException",
    "TransactionInProgressException",
    "RequestLimitExceeded",
    "BandwidthLimitExceeded",
    "LimitExceededException",
    "RequestThrottled",
    "SlowDown",
    "PriorRequestNotComplete",
    "EC2ThrottledException",
}


class ResponseParser:
    """
    Turns the HTTP response of an operation into an ``Outcome``: a success outcome with the response document
    (including the ``ResponseMetadata``), or a failure outcome with an ``AwsError`` of kind SERVICE.
    """

    service: ServiceSpec

    def __init__(self, service: ServiceSpec):
        self.service = service
        self._botocore_parser = ResponseParserFactory().create_parser(
            "json" if service.protocol == ServiceProtocol.JSON else service.protocol
        )

    def parse(self, response: Response, operation: OperationSpec) -> Outcome[ServiceResponse]:
        """
        :param response: the HTTP response of the operation
        :param operation: the operation that was invoked
        :return: the outcome of the operation
        :raises ResponseParserError: if the response body cannot be decoded
        """
        response_dict = {
            "headers": HeadersDict(response.headers.items()),
            "status_code": response.status_code,
            "body": response.data,
            "context": {
                "operation_name": operation.name,
            },
        }
        parsed = self._botocore_parser.parse(response_dict, None)
        metadata = parsed.setdefault("ResponseMetadata", {})
        metadata.setdefault("HTTPStatusCode", response.status_code)
        metadata.setdefault("HTTPHeaders", dict(response.headers.items()))

        if response.status_code >= 300:
            return Outcome.failure(self._create_error(response, parsed))

        document = self._parse_body(response.data)
        document["ResponseMetadata"] = metadata

        if operation.output:
            return Outcome.success(operation.output(document))
        return Outcome.success(document)

    def _parse_body(self, body: bytes) -> Dict[str, Any]:
        if not body or not body.strip():
            return {}
        try:
            document = json.loads(to_str(body))
        except ValueError as e:
            raise ResponseParserError(f"Unable to parse response body as JSON: {e}") from e
        if not isinstance(document, dict):
            raise ResponseParserError(f"Unexpected response document of type {type(document).__name__}")
        return document

    def _create_error(self, response: Response, parsed: Dict[str, Any]) -> AwsError:
        error = parsed.get("Error") or {}
        metadata = parsed.get("ResponseMetadata") or {}
        code = error.get("Code") or str(response.status_code)
        return AwsError(
            kind=ErrorKind.SERVICE,
            code=code,
            message=error.get("Message") or "",
            status_code=response.status_code,
            retryable=is_retryable(response.status_code, code),
            request_id=metadata.get("RequestId"),
        )


class EC2ResponseParser(ResponseParser):
    """
    Decodes the XML documents of the ``ec2`` protocol. The children of the root element become the members of the
    response (with the first character in upper case), ``<item>`` lists are unwrapped.
    """

    def _parse_body(self, body: bytes) -> Dict[str, Any]:
        if not body or not body.strip():
            return {}
        try:
            document = xmltodict.parse(body)
        except Exception as e:
            raise ResponseParserError(f"Unable to parse response body as XML: {e}") from e

        root = next(iter(document.values()), None) or {}
        if not isinstance(root, dict):
            return {}
        result = self._normalize(root)
        result.pop("RequestId", None)
        return result

    def _normalize(self, node: Any) -> Any:
        if isinstance(node, list):
            return [self._normalize(item) for item in node]
        if not isinstance(node, dict):
            return node
        members = {key: value for key, value in node.items() if not key.startswith("@")}
        if list(members.keys()) == ["item"]:
            items = members["item"]
            return self._normalize(items if isinstance(items, list) else [items])
        return {first_char_to_upper(key): self._normalize(value) for key, value in members.items()}


def is_retryable(status_code: int, code: Optional[str]) -> bool:
    """Whether the failed request may succeed when it is sent again."""
    return status_code >= 500 or status_code == 429 or code in THROTTLING_ERROR_CODES


def create_parser(service: ServiceSpec) -> ResponseParser:
    """
    Creates the right parser for the given service.

    :param service: to create the parser for
    :return: ResponseParser which can handle the protocol of the service
    """
    protocol_specific_parsers = {
        ServiceProtocol.REST_JSON: ResponseParser,
        ServiceProtocol.JSON: ResponseParser,
        ServiceProtocol.EC2: EC2ResponseParser,
    }
    return protocol_specific_parsers[service.protocol](service)
