import json

import pytest
from botocore.parsers import ResponseParserError

from clientstack.aws.api import ErrorKind
from clientstack.aws.api.ec2 import EnableReachabilityAnalyzerOrganizationSharingResponse
from clientstack.aws.protocol.parser import create_parser, is_retryable
from clientstack.aws.spec import load_service
from clientstack.http import Response


def _parse(service_name: str, operation_name: str, response: Response):
    service = load_service(service_name)
    return create_parser(service).parse(response, service.operation_model(operation_name))


class TestJSONResponses:
    def test_success(self):
        response = Response.for_json(
            {"project": {"name": "p1", "status": "AVAILABLE"}},
            headers={"x-amzn-RequestId": "request-1"},
        )

        outcome = _parse("evidently", "GetProject", response)

        assert outcome.is_success
        assert outcome.result["project"] == {"name": "p1", "status": "AVAILABLE"}
        metadata = outcome.result["ResponseMetadata"]
        assert metadata["RequestId"] == "request-1"
        assert metadata["HTTPStatusCode"] == 200

    def test_empty_body(self):
        outcome = _parse("evidently", "DeleteProject", Response(b"", status=204))

        assert outcome.is_success
        assert outcome.result["ResponseMetadata"]["HTTPStatusCode"] == 204
        assert set(outcome.result.keys()) == {"ResponseMetadata"}

    def test_invalid_body(self):
        with pytest.raises(ResponseParserError):
            _parse("personalize", "ListDatasets", Response("[1, 2]", status=200))

    def test_json_error_type(self):
        response = Response(
            json.dumps(
                {
                    "__type": "com.amazonaws.directoryservice#EntityDoesNotExistException",
                    "Message": "Directory d-123 does not exist",
                }
            ),
            status=400,
            headers={"x-amzn-RequestId": "request-2"},
            mimetype="application/x-amz-json-1.1",
        )

        outcome = _parse("ds", "DescribeDirectories", response)

        error = outcome.error
        assert error.kind == ErrorKind.SERVICE
        assert error.code == "EntityDoesNotExistException"
        assert error.message == "Directory d-123 does not exist"
        assert error.status_code == 400
        assert error.request_id == "request-2"
        assert not error.retryable
        assert error.sender_fault

    def test_throttling_error(self):
        response = Response(
            json.dumps({"__type": "ThrottlingException", "message": "Rate exceeded"}),
            status=400,
            mimetype="application/x-amz-json-1.1",
        )

        outcome = _parse("workspaces", "DescribeWorkspaces", response)

        assert outcome.error.code == "ThrottlingException"
        assert outcome.error.retryable

    def test_server_error_without_body(self):
        outcome = _parse("evidently", "ListProjects", Response(b"", status=503))

        error = outcome.error
        assert error.kind == ErrorKind.SERVICE
        assert error.code == "503"
        assert error.status_code == 503
        assert error.retryable
        assert not error.sender_fault

    def test_ec2_error_response(self):
        response = Response(
            "<Response><Errors><Error><Code>UnauthorizedOperation</Code>"
            "<Message>You are not authorized to perform this operation.</Message></Error></Errors>"
            "<RequestID>request-3</RequestID></Response>",
            status=403,
            mimetype="text/xml",
        )

        outcome = _parse("ec2", "EnableReachabilityAnalyzerOrganizationSharing", response)

        error = outcome.error
        assert error.code == "UnauthorizedOperation"
        assert error.message == "You are not authorized to perform this operation."
        assert error.status_code == 403
        assert error.request_id == "request-3"


class TestEC2Responses:
    def test_typed_response(self):
        response = Response(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            "<EnableReachabilityAnalyzerOrganizationSharingResponse"
            ' xmlns="http://ec2.amazonaws.com/doc/2016-11-15/">'
            "<requestId>59dbff89-35bd-4eac-99ed-be587EXAMPLE</requestId>"
            "<returnValue>true</returnValue>"
            "</EnableReachabilityAnalyzerOrganizationSharingResponse>",
            status=200,
            mimetype="text/xml",
        )

        outcome = _parse("ec2", "EnableReachabilityAnalyzerOrganizationSharing", response)

        assert outcome.is_success
        result = outcome.result
        assert isinstance(result, EnableReachabilityAnalyzerOrganizationSharingResponse)
        assert result.return_value is True
        assert result.response_metadata.request_id == "59dbff89-35bd-4eac-99ed-be587EXAMPLE"

    def test_lists_are_unwrapped(self):
        response = Response(
            "<DetachInternetGatewayResponse>"
            "<requestId>r1</requestId>"
            "<return>true</return>"
            "<ipamPoolCidrs>"
            "<item><cidr>10.0.0.0/24</cidr></item>"
            "<item><cidr>10.0.1.0/24</cidr></item>"
            "</ipamPoolCidrs>"
            "<hostIdSet><item>h-1</item></hostIdSet>"
            "</DetachInternetGatewayResponse>",
            status=200,
            mimetype="text/xml",
        )

        outcome = _parse("ec2", "DetachInternetGateway", response)

        result = outcome.result
        assert result["Return"] == "true"
        assert result["IpamPoolCidrs"] == [{"Cidr": "10.0.0.0/24"}, {"Cidr": "10.0.1.0/24"}]
        assert result["HostIdSet"] == ["h-1"]
        assert "RequestId" not in result
        assert result["ResponseMetadata"]["RequestId"] == "r1"


@pytest.mark.parametrize(
    "status_code,code,retryable",
    [
        (500, "InternalFailure", True),
        (503, None, True),
        (429, "TooManyRequestsException", True),
        (400, "Throttling", True),
        (400, "ValidationException", False),
        (404, "ResourceNotFoundException", False),
    ],
)
def test_is_retryable(status_code, code, retryable):
    assert is_retryable(status_code, code) == retryable
