"""
Endpoint resolution of the service clients. ``DefaultEndpointProvider`` implements the standard rule set of AWS
regional services (custom endpoint, FIPS and dual-stack variants per partition), ``ResolvedEndpoint`` is the
mutable URL builder that a single dispatch uses to add the operation's host prefix and path.
"""
import abc
import dataclasses
import logging
import re
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

from botocore.utils import (
    is_valid_endpoint_url,
    is_valid_ipv6_endpoint_url,
    percent_encode,
    percent_encode_sequence,
)

from clientstack.aws.api.core import AwsError, ErrorKind, Outcome
from clientstack.constants import AWS_REGION_GLOBAL, AWS_REGION_US_EAST_1

if TYPE_CHECKING:
    from clientstack.aws.configuration import ClientConfiguration

LOG = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Partition:
    name: str
    region_regex: str
    dns_suffix: str
    dual_stack_dns_suffix: str
    supports_fips: bool = True
    supports_dual_stack: bool = True
    regions: Tuple[str, ...] = ()

    def matches(self, region: str) -> bool:
        return region in self.regions or re.match(self.region_regex, region) is not None


PARTITIONS: List[Partition] = [
    Partition(
        name="aws",
        region_regex=r"^(us|eu|ap|sa|ca|me|af|il)\-\w+\-\d+$",
        dns_suffix="amazonaws.com",
        dual_stack_dns_suffix="api.aws",
        regions=(AWS_REGION_GLOBAL,),
    ),
    Partition(
        name="aws-cn",
        region_regex=r"^cn\-\w+\-\d+$",
        dns_suffix="amazonaws.com.cn",
        dual_stack_dns_suffix="api.amazonwebservices.com.cn",
        regions=("aws-cn-global",),
    ),
    Partition(
        name="aws-us-gov",
        region_regex=r"^us\-gov\-\w+\-\d+$",
        dns_suffix="amazonaws.com",
        dual_stack_dns_suffix="api.aws",
        regions=("aws-us-gov-global",),
    ),
    Partition(
        name="aws-iso",
        region_regex=r"^us\-iso\-\w+\-\d+$",
        dns_suffix="c2s.ic.gov",
        dual_stack_dns_suffix="c2s.ic.gov",
        supports_dual_stack=False,
        regions=("aws-iso-global",),
    ),
    Partition(
        name="aws-iso-b",
        region_regex=r"^us\-isob\-\w+\-\d+$",
        dns_suffix="sc2s.sgov.gov",
        dual_stack_dns_suffix="sc2s.sgov.gov",
        supports_dual_stack=False,
        regions=("aws-iso-b-global",),
    ),
]


def get_partition(region: str) -> Partition:
    """Returns the partition of the given region, unknown regions belong to the ``aws`` partition."""
    for partition in PARTITIONS:
        if partition.matches(region):
            return partition
    return PARTITIONS[0]


def compute_signer_region(region: Optional[str]) -> Optional[str]:
    """
    Returns the region a request to the given endpoint region is signed for, f.e. ``fips-us-west-2`` and
    ``us-west-2-fips`` are signed as ``us-west-2``, the global pseudo region as ``us-east-1``.
    """
    if not region:
        return region
    if region == AWS_REGION_GLOBAL:
        return AWS_REGION_US_EAST_1
    if region.startswith("fips-"):
        return region[len("fips-") :]
    if region.endswith("-fips"):
        return region[: -len("-fips")]
    return region


class InvalidEndpointError(ValueError):
    pass


class ResolvedEndpoint:
    """
    The URL builder of one dispatch. It starts with the resolved endpoint URL, and is modified by adding the host
    prefix of the operation, path segments and query parameters.
    """

    def __init__(self, url: str):
        parts = urlsplit(url)
        self.scheme = parts.scheme
        self.netloc = parts.netloc
        self._base_path = parts.path.rstrip("/")
        self._segments: List[str] = []
        self._trailing_slash = False
        self.query: List[Tuple[str, str]] = []

    @property
    def host(self) -> str:
        return urlsplit(f"//{self.netloc}").hostname or ""

    @property
    def path(self) -> str:
        path = self._base_path + "".join("/" + segment for segment in self._segments)
        if self._trailing_slash or not path:
            path += "/"
        return path

    @property
    def url(self) -> str:
        return urlunsplit((self.scheme, self.netloc, self.path, percent_encode_sequence(self.query), ""))

    def add_prefix_if_missing(self, prefix: str) -> None:
        """
        Prepends the given prefix (f.e. ``dataplane.``) to the host, unless the host already starts with it.

        :raises InvalidEndpointError: if the prefixed host is not a valid host name
        """
        if not prefix or self.netloc.startswith(prefix):
            return
        if is_valid_ipv6_endpoint_url(self.url):
            raise InvalidEndpointError(f"Cannot add host prefix {prefix!r} to IPv6 endpoint {self.url}")
        netloc = prefix + self.netloc
        if not is_valid_endpoint_url(f"{self.scheme}://{netloc}"):
            raise InvalidEndpointError(f"Host prefix {prefix!r} results in invalid host {netloc!r}")
        self.netloc = netloc

    def add_path_segments(self, path: str) -> None:
        """Adds the static segments of the given path, which is not encoded any further."""
        self._segments.extend(segment for segment in path.split("/") if segment)
        self._trailing_slash = path.endswith("/") and len(path) > 1

    def add_path_segment(self, value) -> None:
        """Adds a single path segment, which is URL-encoded (including slashes)."""
        self._segments.append(percent_encode(str(value), safe="~"))
        self._trailing_slash = False

    def add_query_parameter(self, name: str, value: str) -> None:
        self.query.append((name, value))

    def __repr__(self):
        return f"ResolvedEndpoint({self.url!r})"


@dataclasses.dataclass(frozen=True)
class EndpointParameters:
    region: Optional[str] = None
    use_fips: bool = False
    use_dual_stack: bool = False
    endpoint: Optional[str] = None


class EndpointProvider(abc.ABC):
    @abc.abstractmethod
    def init_built_in_parameters(self, config: "ClientConfiguration") -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def override_endpoint(self, endpoint: str) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def resolve_endpoint(self, parameters: Dict[str, object] = None) -> Outcome[ResolvedEndpoint]:
        """
        Resolves the endpoint from the built-in parameters, updated with the given parameters.

        :param parameters: endpoint context parameters of the request, by ``EndpointParameters`` field name
        :return: an outcome holding a ``ResolvedEndpoint``, or an error of kind ENDPOINT_RESOLUTION_FAILURE
        """
        raise NotImplementedError


def _resolution_error(message: str) -> Outcome[ResolvedEndpoint]:
    LOG.debug("Endpoint resolution failed: %s", message)
    return Outcome.failure(
        AwsError(
            kind=ErrorKind.ENDPOINT_RESOLUTION_FAILURE,
            code="ENDPOINT_RESOLUTION_FAILURE",
            message=message,
        )
    )


class DefaultEndpointProvider(EndpointProvider):
    """The rule set of regional services with the endpoint ``https://{endpoint_prefix}.{region}.{dns_suffix}``."""

    endpoint_prefix: str
    built_in_parameters: EndpointParameters

    def __init__(self, endpoint_prefix: str):
        self.endpoint_prefix = endpoint_prefix
        self.built_in_parameters = EndpointParameters()

    def init_built_in_parameters(self, config: "ClientConfiguration") -> None:
        self.built_in_parameters = EndpointParameters(
            region=config.region,
            use_fips=config.use_fips,
            use_dual_stack=config.use_dual_stack,
            endpoint=config.endpoint_url,
        )

    def override_endpoint(self, endpoint: str) -> None:
        self.built_in_parameters = dataclasses.replace(self.built_in_parameters, endpoint=endpoint)

    def resolve_endpoint(self, parameters: Dict[str, object] = None) -> Outcome[ResolvedEndpoint]:
        params = self.built_in_parameters
        if parameters:
            params = dataclasses.replace(params, **parameters)

        if params.endpoint:
            if params.use_fips:
                return _resolution_error(
                    "Invalid Configuration: FIPS and custom endpoint are not supported"
                )
            if params.use_dual_stack:
                return _resolution_error(
                    "Invalid Configuration: Dualstack and custom endpoint are not supported"
                )
            return Outcome.success(ResolvedEndpoint(params.endpoint))

        if not params.region:
            return _resolution_error("Invalid Configuration: Missing Region")

        partition = get_partition(params.region)
        prefix = self.endpoint_prefix
        region = params.region

        if params.use_fips and params.use_dual_stack:
            if partition.supports_fips and partition.supports_dual_stack:
                url = f"https://{prefix}-fips.{region}.{partition.dual_stack_dns_suffix}"
                return Outcome.success(ResolvedEndpoint(url))
            return _resolution_error(
                "FIPS and DualStack are enabled, but this partition does not support one or both"
            )

        if params.use_fips:
            if partition.supports_fips:
                return Outcome.success(
                    ResolvedEndpoint(f"https://{prefix}-fips.{region}.{partition.dns_suffix}")
                )
            return _resolution_error("FIPS is enabled but this partition does not support FIPS")

        if params.use_dual_stack:
            if partition.supports_dual_stack:
                return Outcome.success(
                    ResolvedEndpoint(f"https://{prefix}.{region}.{partition.dual_stack_dns_suffix}")
                )
            return _resolution_error(
                "DualStack is enabled but this partition does not support DualStack"
            )

        return Outcome.success(ResolvedEndpoint(f"https://{prefix}.{region}.{partition.dns_suffix}"))
