from clientstack.aws.client import BaseServiceClient
from clientstack.aws.spec import ServiceProtocol, ServiceSpec, rpc_operations

SERVICE = ServiceSpec(
    service_name="personalize",
    client_name="Personalize",
    protocol=ServiceProtocol.JSON,
    endpoint_prefix="personalize",
    signing_name="personalize",
    api_version="2018-05-22",
    target_prefix="AmazonPersonalize",
    operations=rpc_operations(
        "CreateBatchInferenceJob",
        "CreateBatchSegmentJob",
        "CreateCampaign",
        "CreateDataset",
        "CreateDatasetExportJob",
        "CreateDatasetGroup",
        "CreateDatasetImportJob",
        "CreateEventTracker",
        "CreateFilter",
        "CreateMetricAttribution",
        "CreateRecommender",
        "CreateSchema",
        "CreateSolution",
        "CreateSolutionVersion",
        "DeleteCampaign",
        "DeleteDataset",
        "DeleteDatasetGroup",
        "DeleteEventTracker",
        "DeleteFilter",
        "DeleteMetricAttribution",
        "DeleteRecommender",
        "DeleteSchema",
        "DeleteSolution",
        "DescribeAlgorithm",
        "DescribeBatchInferenceJob",
        "DescribeBatchSegmentJob",
        "DescribeCampaign",
        "DescribeDataset",
        "DescribeDatasetExportJob",
        "DescribeDatasetGroup",
        "DescribeDatasetImportJob",
        "DescribeEventTracker",
        "DescribeFeatureTransformation",
        "DescribeFilter",
        "DescribeMetricAttribution",
        "DescribeRecipe",
        "DescribeRecommender",
        "DescribeSchema",
        "DescribeSolution",
        "DescribeSolutionVersion",
        "GetSolutionMetrics",
        "ListBatchInferenceJobs",
        "ListBatchSegmentJobs",
        "ListCampaigns",
        "ListDatasetExportJobs",
        "ListDatasetGroups",
        "ListDatasetImportJobs",
        "ListDatasets",
        "ListEventTrackers",
        "ListFilters",
        "ListMetricAttributionMetrics",
        "ListMetricAttributions",
        "ListRecipes",
        "ListRecommenders",
        "ListSchemas",
        "ListSolutionVersions",
        "ListSolutions",
        "ListTagsForResource",
        "StartRecommender",
        "StopRecommender",
        "StopSolutionVersionCreation",
        "TagResource",
        "UntagResource",
        "UpdateCampaign",
        "UpdateMetricAttribution",
        "UpdateRecommender",
    ),
)


class PersonalizeClient(BaseServiceClient):
    service = SERVICE
