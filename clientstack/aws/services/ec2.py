from clientstack.aws.api.ec2 import EnableReachabilityAnalyzerOrganizationSharingResponse
from clientstack.aws.client import BaseServiceClient
from clientstack.aws.spec import OperationSpec, ServiceProtocol, ServiceSpec, rpc_operations

SERVICE = ServiceSpec(
    service_name="ec2",
    client_name="EC2",
    protocol=ServiceProtocol.EC2,
    endpoint_prefix="ec2",
    signing_name="ec2",
    api_version="2016-11-15",
    operations={
        **rpc_operations(
            "DeleteNetworkInsightsPath",
            "DeprovisionIpamPoolCidr",
            "DetachInternetGateway",
            "GetConsoleScreenshot",
            "GetHostReservationPurchasePreview",
            "RegisterTransitGatewayMulticastGroupMembers",
        ),
        "EnableReachabilityAnalyzerOrganizationSharing": OperationSpec(
            name="EnableReachabilityAnalyzerOrganizationSharing",
            output=EnableReachabilityAnalyzerOrganizationSharingResponse.from_parsed,
        ),
    },
)


class EC2Client(BaseServiceClient):
    service = SERVICE
