from clientstack.aws.client import BaseServiceClient
from clientstack.aws.spec import HttpMethod, ServiceProtocol, ServiceSpec, index_operations, operation

GET = HttpMethod.GET
POST = HttpMethod.POST
PATCH = HttpMethod.PATCH
DELETE = HttpMethod.DELETE

# operations of the data plane are sent to dataplane.evidently.{region}.amazonaws.com
DATA_PLANE = "dataplane."

PAGING = {"MaxResults": "maxResults", "NextToken": "nextToken"}

EXPERIMENT = "/projects/{Project}/experiments/{Experiment}"
FEATURE = "/projects/{Project}/features/{Feature}"
LAUNCH = "/projects/{Project}/launches/{Launch}"

# a project resource is checked before its project
EXPERIMENT_REQUIRED = ("Experiment", "Project")
FEATURE_REQUIRED = ("Feature", "Project")
LAUNCH_REQUIRED = ("Launch", "Project")

SERVICE = ServiceSpec(
    service_name="evidently",
    client_name="Evidently",
    protocol=ServiceProtocol.REST_JSON,
    endpoint_prefix="evidently",
    signing_name="evidently",
    api_version="2021-02-01",
    operations=index_operations(
        operation(
            "BatchEvaluateFeature",
            POST,
            "/projects/{Project}/evaluations",
            host_prefix=DATA_PLANE,
        ),
        operation("CreateExperiment", POST, "/projects/{Project}/experiments"),
        operation("CreateFeature", POST, "/projects/{Project}/features"),
        operation("CreateLaunch", POST, "/projects/{Project}/launches"),
        operation("CreateProject", POST, "/projects"),
        operation("CreateSegment", POST, "/segments"),
        operation("DeleteExperiment", DELETE, EXPERIMENT, required=EXPERIMENT_REQUIRED),
        operation("DeleteFeature", DELETE, FEATURE, required=FEATURE_REQUIRED),
        operation("DeleteLaunch", DELETE, LAUNCH, required=LAUNCH_REQUIRED),
        operation("DeleteProject", DELETE, "/projects/{Project}"),
        operation("DeleteSegment", DELETE, "/segments/{Segment}"),
        operation(
            "EvaluateFeature",
            POST,
            "/projects/{Project}/evaluations/{Feature}",
            required=FEATURE_REQUIRED,
            host_prefix=DATA_PLANE,
        ),
        operation("GetExperiment", GET, EXPERIMENT, required=EXPERIMENT_REQUIRED),
        operation(
            "GetExperimentResults",
            POST,
            f"{EXPERIMENT}/results",
            required=EXPERIMENT_REQUIRED,
        ),
        operation("GetFeature", GET, FEATURE, required=FEATURE_REQUIRED),
        operation("GetLaunch", GET, LAUNCH, required=LAUNCH_REQUIRED),
        operation("GetProject", GET, "/projects/{Project}"),
        operation("GetSegment", GET, "/segments/{Segment}"),
        operation(
            "ListExperiments",
            GET,
            "/projects/{Project}/experiments",
            query={"Status": "status", **PAGING},
        ),
        operation("ListFeatures", GET, "/projects/{Project}/features", query=PAGING),
        operation(
            "ListLaunches",
            GET,
            "/projects/{Project}/launches",
            query={"Status": "status", **PAGING},
        ),
        operation("ListProjects", GET, "/projects", query=PAGING),
        operation(
            "ListSegmentReferences",
            GET,
            "/segments/{Segment}/references",
            required=("Segment", "Type"),
            query={"Type": "type", **PAGING},
        ),
        operation("ListSegments", GET, "/segments", query=PAGING),
        operation("ListTagsForResource", GET, "/tags/{ResourceArn}"),
        operation(
            "PutProjectEvents",
            POST,
            "/events/projects/{Project}",
            host_prefix=DATA_PLANE,
        ),
        operation("StartExperiment", POST, f"{EXPERIMENT}/start", required=EXPERIMENT_REQUIRED),
        operation("StartLaunch", POST, f"{LAUNCH}/start", required=LAUNCH_REQUIRED),
        operation("StopExperiment", POST, f"{EXPERIMENT}/cancel", required=EXPERIMENT_REQUIRED),
        operation("StopLaunch", POST, f"{LAUNCH}/cancel", required=LAUNCH_REQUIRED),
        operation("TagResource", POST, "/tags/{ResourceArn}"),
        operation("TestSegmentPattern", POST, "/test-segment-pattern"),
        operation(
            "UntagResource",
            DELETE,
            "/tags/{ResourceArn}",
            required=("ResourceArn", "TagKeys"),
            query={"TagKeys": "tagKeys"},
        ),
        operation("UpdateExperiment", PATCH, EXPERIMENT, required=EXPERIMENT_REQUIRED),
        operation("UpdateFeature", PATCH, FEATURE, required=FEATURE_REQUIRED),
        operation("UpdateLaunch", PATCH, LAUNCH, required=LAUNCH_REQUIRED),
        operation("UpdateProject", PATCH, "/projects/{Project}"),
        operation("UpdateProjectDataDelivery", PATCH, "/projects/{Project}/data-delivery"),
    ),
)


class CloudWatchEvidentlyClient(BaseServiceClient):
    service = SERVICE
