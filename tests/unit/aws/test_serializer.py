import json
from datetime import date, datetime, timezone
from decimal import Decimal
from urllib.parse import parse_qs

import pytest

from clientstack.aws.endpoints import ResolvedEndpoint
from clientstack.aws.protocol.serializer import (
    EC2RequestSerializer,
    JSONRequestSerializer,
    ProtocolSerializerError,
    RestJSONRequestSerializer,
    create_serializer,
)
from clientstack.aws.spec import load_service


def _serialize(service_name: str, operation_name: str, request: dict, url: str = None):
    service = load_service(service_name)
    serializer = create_serializer(service, user_agent="clientstack/test")
    endpoint = ResolvedEndpoint(url or f"https://{service.endpoint_prefix}.us-east-1.amazonaws.com")
    return serializer.serialize_to_request(
        request, service.operation_model(operation_name), endpoint
    )


def test_create_serializer():
    assert isinstance(create_serializer(load_service("workdocs")), RestJSONRequestSerializer)
    assert isinstance(create_serializer(load_service("personalize")), JSONRequestSerializer)
    assert isinstance(create_serializer(load_service("ec2")), EC2RequestSerializer)


class TestRestJSONSerializer:
    def test_path_query_and_headers(self):
        request = _serialize(
            "workdocs",
            "DescribeFolderContents",
            {
                "FolderId": "folder-1",
                "AuthenticationToken": "token",
                "Limit": 10,
                "Include": "INITIALIZED",
                "Marker": None,
            },
        )

        assert request.method == "GET"
        assert request.url == (
            "https://workdocs.us-east-1.amazonaws.com/api/v1/folders/folder-1/contents"
            "?limit=10&include=INITIALIZED"
        )
        assert request.headers["Authentication"] == "token"
        assert request.headers["User-Agent"] == "clientstack/test"
        assert not request.body
        assert "Content-Type" not in request.headers

    def test_body_members(self):
        request = _serialize(
            "workdocs",
            "UpdateDocument",
            {"DocumentId": "doc-1", "Name": "report.txt", "ResourceState": "ACTIVE"},
        )

        assert request.method == "PATCH"
        assert request.url.endswith("/api/v1/documents/doc-1")
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.body) == {"Name": "report.txt", "ResourceState": "ACTIVE"}

    def test_list_and_boolean_query_values(self):
        request = _serialize(
            "pinpoint-email",
            "UntagResource",
            {"ResourceArn": "arn:aws:ses:us-east-1:000000000000:identity/a", "TagKeys": ["k1", "k2"]},
        )

        query = parse_qs(request.url.split("?", 1)[1])
        assert query == {
            "ResourceArn": ["arn:aws:ses:us-east-1:000000000000:identity/a"],
            "TagKeys": ["k1", "k2"],
        }
        assert request.method == "DELETE"

        request = _serialize(
            "workdocs",
            "DeleteDocumentVersion",
            {"DocumentId": "d", "VersionId": "v", "DeletePriorVersions": True},
        )
        assert request.url.endswith("/api/v1/documentVersions/d/versions/v?deletePriorVersions=true")

    def test_timestamp_query_values(self):
        request = _serialize(
            "pinpoint-email",
            "GetDomainStatisticsReport",
            {
                "Domain": "example.com",
                "StartDate": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
                "EndDate": date(2024, 1, 3),
            },
        )

        assert request.url == (
            "https://email.us-east-1.amazonaws.com"
            "/v1/email/deliverability-dashboard/statistics-report/example.com"
            "?StartDate=2024-01-02T03%3A04%3A05Z&EndDate=2024-01-03T00%3A00%3A00Z"
        )

    def test_path_labels_are_encoded(self):
        request = _serialize("pinpoint-email", "GetEmailIdentity", {"EmailIdentity": "me+1@example.com"})

        assert request.url.endswith("/v1/email/identities/me%2B1%40example.com")

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_path_label(self, value):
        with pytest.raises(ProtocolSerializerError) as e:
            _serialize("evidently", "GetProject", {"Project": value})

        assert e.match(r"Path parameter \[Project\] of GetProject must not be empty")

    def test_base_path_of_endpoint(self):
        request = _serialize(
            "evidently", "GetProject", {"Project": "p1"}, url="http://localhost:4566/evidently/"
        )

        assert request.url == "http://localhost:4566/evidently/projects/p1"

    def test_request_is_not_modified(self):
        members = {"Project": "p1", "name": "exp", "treatments": [{"name": "t1"}]}

        _serialize("evidently", "CreateExperiment", members)

        assert members == {"Project": "p1", "name": "exp", "treatments": [{"name": "t1"}]}

    def test_timestamps_and_blobs_in_body(self):
        request = _serialize(
            "evidently",
            "PutProjectEvents",
            {
                "Project": "p1",
                "events": [
                    {
                        "timestamp": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
                        "type": "aws.evidently.custom",
                        "data": b"{}",
                    }
                ],
            },
        )

        assert json.loads(request.body) == {
            "events": [{"timestamp": 1704164645, "type": "aws.evidently.custom", "data": "e30="}]
        }


class TestJSONSerializer:
    def test_target_and_body(self):
        request = _serialize(
            "personalize",
            "DescribeDatasetGroup",
            {"datasetGroupArn": "arn:aws:personalize:us-east-1:000000000000:dataset-group/g"},
        )

        assert request.method == "POST"
        assert request.url == "https://personalize.us-east-1.amazonaws.com/"
        assert request.headers["X-Amz-Target"] == "AmazonPersonalize.DescribeDatasetGroup"
        assert request.headers["Content-Type"] == "application/x-amz-json-1.1"
        assert json.loads(request.body) == {
            "datasetGroupArn": "arn:aws:personalize:us-east-1:000000000000:dataset-group/g"
        }

    def test_empty_request(self):
        request = _serialize("ds", "DescribeDirectories", {})

        assert request.headers["X-Amz-Target"] == "DirectoryService_20150416.DescribeDirectories"
        assert request.body == b"{}"

    def test_workspaces_target(self):
        request = _serialize("workspaces", "DescribeWorkspaces", {"Limit": 5})

        assert request.headers["X-Amz-Target"] == "WorkspacesService.DescribeWorkspaces"
        assert json.loads(request.body) == {"Limit": 5}

    def test_decimal_values(self):
        request = _serialize(
            "ds", "DescribeDirectories", {"Limit": Decimal("-1.5"), "NextToken": Decimal("10")}
        )

        assert json.loads(request.body) == {"Limit": -1.5, "NextToken": 10}


class TestEC2Serializer:
    def test_flattened_members(self):
        request = _serialize(
            "ec2",
            "RegisterTransitGatewayMulticastGroupMembers",
            {
                "transitGatewayMulticastDomainId": "tgw-mcast-domain-1",
                "GroupIpAddress": "224.0.0.1",
                "NetworkInterfaceIds": ["eni-1", "eni-2"],
                "DryRun": False,
            },
        )

        assert request.method == "POST"
        assert request.url == "https://ec2.us-east-1.amazonaws.com/"
        assert request.headers["Content-Type"].startswith("application/x-www-form-urlencoded")
        assert parse_qs(request.body.decode("utf-8")) == {
            "Action": ["RegisterTransitGatewayMulticastGroupMembers"],
            "Version": ["2016-11-15"],
            "TransitGatewayMulticastDomainId": ["tgw-mcast-domain-1"],
            "GroupIpAddress": ["224.0.0.1"],
            "NetworkInterfaceIds.1": ["eni-1"],
            "NetworkInterfaceIds.2": ["eni-2"],
            "DryRun": ["false"],
        }

    def test_nested_structures(self):
        request = _serialize(
            "ec2",
            "GetHostReservationPurchasePreview",
            {"OfferingId": "o-1", "HostIdSet": ["h-1"], "Filter": {"name": "n", "values": ["a"]}},
        )

        params = parse_qs(request.body.decode("utf-8"))
        assert params["HostIdSet.1"] == ["h-1"]
        assert params["Filter.Name"] == ["n"]
        assert params["Filter.Values.1"] == ["a"]
