from clientstack.aws.client import BaseServiceClient
from clientstack.aws.spec import HttpMethod, ServiceProtocol, ServiceSpec, index_operations, operation

GET = HttpMethod.GET
POST = HttpMethod.POST
PUT = HttpMethod.PUT
PATCH = HttpMethod.PATCH
DELETE = HttpMethod.DELETE

PAGING = {"Limit": "limit", "Marker": "marker"}

SERVICE = ServiceSpec(
    service_name="workdocs",
    client_name="WorkDocs",
    protocol=ServiceProtocol.REST_JSON,
    endpoint_prefix="workdocs",
    signing_name="workdocs",
    api_version="2016-05-01",
    headers={"AuthenticationToken": "Authentication"},
    operations=index_operations(
        operation(
            "AbortDocumentVersionUpload",
            DELETE,
            "/api/v1/documents/{DocumentId}/versions/{VersionId}",
        ),
        operation("ActivateUser", POST, "/api/v1/users/{UserId}/activation"),
        operation("AddResourcePermissions", POST, "/api/v1/resources/{ResourceId}/permissions"),
        operation(
            "CreateComment",
            POST,
            "/api/v1/documents/{DocumentId}/versions/{VersionId}/comment",
        ),
        operation(
            "CreateCustomMetadata",
            PUT,
            "/api/v1/resources/{ResourceId}/customMetadata",
            query={"VersionId": "versionid"},
        ),
        operation("CreateFolder", POST, "/api/v1/folders"),
        operation("CreateLabels", PUT, "/api/v1/resources/{ResourceId}/labels"),
        operation(
            "CreateNotificationSubscription",
            POST,
            "/api/v1/organizations/{OrganizationId}/subscriptions",
        ),
        operation("CreateUser", POST, "/api/v1/users"),
        operation("DeactivateUser", DELETE, "/api/v1/users/{UserId}/activation"),
        operation(
            "DeleteComment",
            DELETE,
            "/api/v1/documents/{DocumentId}/versions/{VersionId}/comment/{CommentId}",
        ),
        operation(
            "DeleteCustomMetadata",
            DELETE,
            "/api/v1/resources/{ResourceId}/customMetadata",
            query={"VersionId": "versionId", "Keys": "keys", "DeleteAll": "deleteAll"},
        ),
        operation("DeleteDocument", DELETE, "/api/v1/documents/{DocumentId}"),
        operation(
            "DeleteDocumentVersion",
            DELETE,
            "/api/v1/documentVersions/{DocumentId}/versions/{VersionId}",
            required=("DocumentId", "VersionId", "DeletePriorVersions"),
            query={"DeletePriorVersions": "deletePriorVersions"},
        ),
        operation("DeleteFolder", DELETE, "/api/v1/folders/{FolderId}"),
        operation("DeleteFolderContents", DELETE, "/api/v1/folders/{FolderId}/contents"),
        operation(
            "DeleteLabels",
            DELETE,
            "/api/v1/resources/{ResourceId}/labels",
            query={"Labels": "labels", "DeleteAll": "deleteAll"},
        ),
        operation(
            "DeleteNotificationSubscription",
            DELETE,
            "/api/v1/organizations/{OrganizationId}/subscriptions/{SubscriptionId}",
            required=("SubscriptionId", "OrganizationId"),
        ),
        operation("DeleteUser", DELETE, "/api/v1/users/{UserId}"),
        operation(
            "DescribeActivities",
            GET,
            "/api/v1/activities",
            query={
                "StartTime": "startTime",
                "EndTime": "endTime",
                "OrganizationId": "organizationId",
                "ActivityTypes": "activityTypes",
                "ResourceId": "resourceId",
                "UserId": "userId",
                "IncludeIndirectActivities": "includeIndirectActivities",
                **PAGING,
            },
        ),
        operation(
            "DescribeComments",
            GET,
            "/api/v1/documents/{DocumentId}/versions/{VersionId}/comments",
            query=PAGING,
        ),
        operation(
            "DescribeDocumentVersions",
            GET,
            "/api/v1/documents/{DocumentId}/versions",
            query={"Include": "include", "Fields": "fields", **PAGING},
        ),
        operation(
            "DescribeFolderContents",
            GET,
            "/api/v1/folders/{FolderId}/contents",
            query={
                "Sort": "sort",
                "Order": "order",
                "Type": "type",
                "Include": "include",
                **PAGING,
            },
        ),
        operation(
            "DescribeGroups",
            GET,
            "/api/v1/groups",
            required=("SearchQuery",),
            query={"SearchQuery": "searchQuery", "OrganizationId": "organizationId", **PAGING},
        ),
        operation(
            "DescribeNotificationSubscriptions",
            GET,
            "/api/v1/organizations/{OrganizationId}/subscriptions",
            query=PAGING,
        ),
        operation(
            "DescribeResourcePermissions",
            GET,
            "/api/v1/resources/{ResourceId}/permissions",
            query={"PrincipalId": "principalId", **PAGING},
        ),
        operation(
            "DescribeRootFolders",
            GET,
            "/api/v1/me/root",
            required=("AuthenticationToken",),
            query=PAGING,
        ),
        operation(
            "DescribeUsers",
            GET,
            "/api/v1/users",
            query={
                "OrganizationId": "organizationId",
                "UserIds": "userIds",
                "Query": "query",
                "Include": "include",
                "Order": "order",
                "Sort": "sort",
                "Fields": "fields",
                **PAGING,
            },
        ),
        operation("GetCurrentUser", GET, "/api/v1/me", required=("AuthenticationToken",)),
        operation(
            "GetDocument",
            GET,
            "/api/v1/documents/{DocumentId}",
            query={"IncludeCustomMetadata": "includeCustomMetadata"},
        ),
        operation(
            "GetDocumentPath",
            GET,
            "/api/v1/documents/{DocumentId}/path",
            query={"Fields": "fields", **PAGING},
        ),
        operation(
            "GetDocumentVersion",
            GET,
            "/api/v1/documents/{DocumentId}/versions/{VersionId}",
            query={"Fields": "fields", "IncludeCustomMetadata": "includeCustomMetadata"},
        ),
        operation(
            "GetFolder",
            GET,
            "/api/v1/folders/{FolderId}",
            query={"IncludeCustomMetadata": "includeCustomMetadata"},
        ),
        operation(
            "GetFolderPath",
            GET,
            "/api/v1/folders/{FolderId}/path",
            query={"Fields": "fields", **PAGING},
        ),
        operation(
            "GetResources",
            GET,
            "/api/v1/resources",
            query={"UserId": "userId", "CollectionType": "collectionType", **PAGING},
        ),
        operation("InitiateDocumentVersionUpload", POST, "/api/v1/documents"),
        operation(
            "RemoveAllResourcePermissions", DELETE, "/api/v1/resources/{ResourceId}/permissions"
        ),
        operation(
            "RemoveResourcePermission",
            DELETE,
            "/api/v1/resources/{ResourceId}/permissions/{PrincipalId}",
            query={"PrincipalType": "type"},
        ),
        operation(
            "RestoreDocumentVersions", POST, "/api/v1/documentVersions/restore/{DocumentId}"
        ),
        operation("UpdateDocument", PATCH, "/api/v1/documents/{DocumentId}"),
        operation(
            "UpdateDocumentVersion",
            PATCH,
            "/api/v1/documents/{DocumentId}/versions/{VersionId}",
        ),
        operation("UpdateFolder", PATCH, "/api/v1/folders/{FolderId}"),
        operation("UpdateUser", PATCH, "/api/v1/users/{UserId}"),
    ),
)


class WorkDocsClient(BaseServiceClient):
    service = SERVICE
