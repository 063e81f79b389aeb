from clientstack.aws.client import BaseServiceClient
from clientstack.aws.spec import HttpMethod, ServiceProtocol, ServiceSpec, index_operations, operation

GET = HttpMethod.GET
POST = HttpMethod.POST
PUT = HttpMethod.PUT
DELETE = HttpMethod.DELETE

PAGING = {"NextToken": "NextToken", "PageSize": "PageSize"}

CONFIGURATION_SET = "/v1/email/configuration-sets/{ConfigurationSetName}"
DASHBOARD = "/v1/email/deliverability-dashboard"

SERVICE = ServiceSpec(
    service_name="pinpoint-email",
    client_name="Pinpoint Email",
    protocol=ServiceProtocol.REST_JSON,
    endpoint_prefix="email",
    signing_name="ses",
    api_version="2018-07-26",
    operations=index_operations(
        operation("CreateConfigurationSet", POST, "/v1/email/configuration-sets"),
        operation(
            "CreateConfigurationSetEventDestination",
            POST,
            f"{CONFIGURATION_SET}/event-destinations",
        ),
        operation("CreateDedicatedIpPool", POST, "/v1/email/dedicated-ip-pools"),
        operation("CreateDeliverabilityTestReport", POST, f"{DASHBOARD}/test"),
        operation("CreateEmailIdentity", POST, "/v1/email/identities"),
        operation("DeleteConfigurationSet", DELETE, CONFIGURATION_SET),
        operation(
            "DeleteConfigurationSetEventDestination",
            DELETE,
            f"{CONFIGURATION_SET}/event-destinations/{{EventDestinationName}}",
        ),
        operation("DeleteDedicatedIpPool", DELETE, "/v1/email/dedicated-ip-pools/{PoolName}"),
        operation("DeleteEmailIdentity", DELETE, "/v1/email/identities/{EmailIdentity}"),
        operation("GetAccount", GET, "/v1/email/account"),
        operation(
            "GetBlacklistReports",
            GET,
            f"{DASHBOARD}/blacklist-report",
            required=("BlacklistItemNames",),
            query={"BlacklistItemNames": "BlacklistItemNames"},
        ),
        operation("GetConfigurationSet", GET, CONFIGURATION_SET),
        operation(
            "GetConfigurationSetEventDestinations",
            GET,
            f"{CONFIGURATION_SET}/event-destinations",
        ),
        operation("GetDedicatedIp", GET, "/v1/email/dedicated-ips/{Ip}"),
        operation(
            "GetDedicatedIps",
            GET,
            "/v1/email/dedicated-ips",
            query={"PoolName": "PoolName", **PAGING},
        ),
        operation("GetDeliverabilityDashboardOptions", GET, DASHBOARD),
        operation("GetDeliverabilityTestReport", GET, f"{DASHBOARD}/test-reports/{{ReportId}}"),
        operation(
            "GetDomainDeliverabilityCampaign", GET, f"{DASHBOARD}/campaigns/{{CampaignId}}"
        ),
        operation(
            "GetDomainStatisticsReport",
            GET,
            f"{DASHBOARD}/statistics-report/{{Domain}}",
            required=("Domain", "StartDate", "EndDate"),
            query={"StartDate": "StartDate", "EndDate": "EndDate"},
        ),
        operation("GetEmailIdentity", GET, "/v1/email/identities/{EmailIdentity}"),
        operation("ListConfigurationSets", GET, "/v1/email/configuration-sets", query=PAGING),
        operation("ListDedicatedIpPools", GET, "/v1/email/dedicated-ip-pools", query=PAGING),
        operation("ListDeliverabilityTestReports", GET, f"{DASHBOARD}/test-reports", query=PAGING),
        operation(
            "ListDomainDeliverabilityCampaigns",
            GET,
            f"{DASHBOARD}/domains/{{SubscribedDomain}}/campaigns",
            required=("StartDate", "EndDate", "SubscribedDomain"),
            query={"StartDate": "StartDate", "EndDate": "EndDate", **PAGING},
        ),
        operation("ListEmailIdentities", GET, "/v1/email/identities", query=PAGING),
        operation(
            "ListTagsForResource",
            GET,
            "/v1/email/tags",
            required=("ResourceArn",),
            query={"ResourceArn": "ResourceArn"},
        ),
        operation(
            "PutAccountDedicatedIpWarmupAttributes", PUT, "/v1/email/account/dedicated-ips/warmup"
        ),
        operation("PutAccountSendingAttributes", PUT, "/v1/email/account/sending"),
        operation(
            "PutConfigurationSetDeliveryOptions", PUT, f"{CONFIGURATION_SET}/delivery-options"
        ),
        operation(
            "PutConfigurationSetReputationOptions", PUT, f"{CONFIGURATION_SET}/reputation-options"
        ),
        operation("PutConfigurationSetSendingOptions", PUT, f"{CONFIGURATION_SET}/sending"),
        operation(
            "PutConfigurationSetTrackingOptions", PUT, f"{CONFIGURATION_SET}/tracking-options"
        ),
        operation("PutDedicatedIpInPool", PUT, "/v1/email/dedicated-ips/{Ip}/pool"),
        operation("PutDedicatedIpWarmupAttributes", PUT, "/v1/email/dedicated-ips/{Ip}/warmup"),
        operation("PutDeliverabilityDashboardOption", PUT, DASHBOARD),
        operation(
            "PutEmailIdentityDkimAttributes", PUT, "/v1/email/identities/{EmailIdentity}/dkim"
        ),
        operation(
            "PutEmailIdentityFeedbackAttributes",
            PUT,
            "/v1/email/identities/{EmailIdentity}/feedback",
        ),
        operation(
            "PutEmailIdentityMailFromAttributes",
            PUT,
            "/v1/email/identities/{EmailIdentity}/mail-from",
        ),
        operation("SendEmail", POST, "/v1/email/outbound-emails"),
        operation("TagResource", POST, "/v1/email/tags"),
        operation(
            "UntagResource",
            DELETE,
            "/v1/email/tags",
            required=("ResourceArn", "TagKeys"),
            query={"ResourceArn": "ResourceArn", "TagKeys": "TagKeys"},
        ),
        operation(
            "UpdateConfigurationSetEventDestination",
            PUT,
            f"{CONFIGURATION_SET}/event-destinations/{{EventDestinationName}}",
        ),
    ),
)


class PinpointEmailClient(BaseServiceClient):
    service = SERVICE
