from clientstack.aws.client import BaseServiceClient
from clientstack.aws.spec import ServiceProtocol, ServiceSpec, rpc_operations

SERVICE = ServiceSpec(
    service_name="ds",
    client_name="Directory Service",
    protocol=ServiceProtocol.JSON,
    endpoint_prefix="ds",
    signing_name="ds",
    api_version="2015-04-16",
    target_prefix="DirectoryService_20150416",
    operations=rpc_operations(
        "AcceptSharedDirectory",
        "AddIpRoutes",
        "AddRegion",
        "AddTagsToResource",
        "CancelSchemaExtension",
        "ConnectDirectory",
        "CreateAlias",
        "CreateComputer",
        "CreateConditionalForwarder",
        "CreateDirectory",
        "CreateLogSubscription",
        "CreateMicrosoftAD",
        "CreateSnapshot",
        "CreateTrust",
        "DeleteConditionalForwarder",
        "DeleteDirectory",
        "DeleteLogSubscription",
        "DeleteSnapshot",
        "DeleteTrust",
        "DeregisterCertificate",
        "DeregisterEventTopic",
        "DescribeCertificate",
        "DescribeClientAuthenticationSettings",
        "DescribeConditionalForwarders",
        "DescribeDirectories",
        "DescribeDomainControllers",
        "DescribeEventTopics",
        "DescribeLDAPSSettings",
        "DescribeRegions",
        "DescribeSettings",
        "DescribeSharedDirectories",
        "DescribeSnapshots",
        "DescribeTrusts",
        "DescribeUpdateDirectory",
        "DisableClientAuthentication",
        "DisableLDAPS",
        "DisableRadius",
        "DisableSso",
        "EnableClientAuthentication",
        "EnableLDAPS",
        "EnableRadius",
        "EnableSso",
        "GetDirectoryLimits",
        "GetSnapshotLimits",
        "ListCertificates",
        "ListIpRoutes",
        "ListLogSubscriptions",
        "ListSchemaExtensions",
        "ListTagsForResource",
        "RegisterCertificate",
        "RegisterEventTopic",
        "RejectSharedDirectory",
        "RemoveIpRoutes",
        "RemoveRegion",
        "RemoveTagsFromResource",
        "ResetUserPassword",
        "RestoreFromSnapshot",
        "ShareDirectory",
        "StartSchemaExtension",
        "UnshareDirectory",
        "UpdateConditionalForwarder",
        "UpdateDirectorySetup",
        "UpdateNumberOfDomainControllers",
        "UpdateRadius",
        "UpdateSettings",
        "UpdateTrust",
        "VerifyTrust",
    ),
)


class DirectoryServiceClient(BaseServiceClient):
    service = SERVICE
