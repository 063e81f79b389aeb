from clientstack.aws.client import BaseServiceClient
from clientstack.aws.spec import ServiceProtocol, ServiceSpec, rpc_operations

SERVICE = ServiceSpec(
    service_name="workspaces",
    client_name="WorkSpaces",
    protocol=ServiceProtocol.JSON,
    endpoint_prefix="workspaces",
    signing_name="workspaces",
    api_version="2015-04-08",
    target_prefix="WorkspacesService",
    operations=rpc_operations(
        "AssociateConnectionAlias",
        "AssociateIpGroups",
        "AuthorizeIpRules",
        "CopyWorkspaceImage",
        "CreateConnectClientAddIn",
        "CreateConnectionAlias",
        "CreateIpGroup",
        "CreateStandbyWorkspaces",
        "CreateTags",
        "CreateUpdatedWorkspaceImage",
        "CreateWorkspaceBundle",
        "CreateWorkspaceImage",
        "CreateWorkspaces",
        "DeleteClientBranding",
        "DeleteConnectClientAddIn",
        "DeleteConnectionAlias",
        "DeleteIpGroup",
        "DeleteTags",
        "DeleteWorkspaceBundle",
        "DeleteWorkspaceImage",
        "DeregisterWorkspaceDirectory",
        "DescribeAccount",
        "DescribeAccountModifications",
        "DescribeClientBranding",
        "DescribeClientProperties",
        "DescribeConnectClientAddIns",
        "DescribeConnectionAliasPermissions",
        "DescribeConnectionAliases",
        "DescribeIpGroups",
        "DescribeTags",
        "DescribeWorkspaceBundles",
        "DescribeWorkspaceDirectories",
        "DescribeWorkspaceImagePermissions",
        "DescribeWorkspaceImages",
        "DescribeWorkspaceSnapshots",
        "DescribeWorkspaces",
        "DescribeWorkspacesConnectionStatus",
        "DisassociateConnectionAlias",
        "DisassociateIpGroups",
        "ImportClientBranding",
        "ImportWorkspaceImage",
        "ListAvailableManagementCidrRanges",
        "MigrateWorkspace",
        "ModifyAccount",
        "ModifyCertificateBasedAuthProperties",
        "ModifyClientProperties",
        "ModifySamlProperties",
        "ModifySelfservicePermissions",
        "ModifyWorkspaceAccessProperties",
        "ModifyWorkspaceCreationProperties",
        "ModifyWorkspaceProperties",
        "ModifyWorkspaceState",
        "RebootWorkspaces",
        "RebuildWorkspaces",
        "RegisterWorkspaceDirectory",
        "RestoreWorkspace",
        "RevokeIpRules",
        "StartWorkspaces",
        "StopWorkspaces",
        "TerminateWorkspaces",
        "UpdateConnectClientAddIn",
        "UpdateConnectionAliasPermission",
        "UpdateRulesOfIpGroup",
        "UpdateWorkspaceBundle",
        "UpdateWorkspaceImagePermission",
    ),
)


class WorkSpacesClient(BaseServiceClient):
    service = SERVICE
