import dataclasses
from typing import Any, Dict, Optional


@dataclasses.dataclass(frozen=True)
class ResponseMetadata:
    request_id: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class EnableReachabilityAnalyzerOrganizationSharingResponse:
    """
    Result of ``EnableReachabilityAnalyzerOrganizationSharing``. Instances are immutable, the ``with_*`` methods
    return modified copies.
    """

    return_value: bool = False
    response_metadata: ResponseMetadata = dataclasses.field(default_factory=ResponseMetadata)

    def with_return_value(self, return_value: bool) -> "EnableReachabilityAnalyzerOrganizationSharingResponse":
        return dataclasses.replace(self, return_value=return_value)

    def with_response_metadata(
        self, response_metadata: ResponseMetadata
    ) -> "EnableReachabilityAnalyzerOrganizationSharingResponse":
        return dataclasses.replace(self, response_metadata=response_metadata)

    @classmethod
    def from_parsed(
        cls, document: Dict[str, Any]
    ) -> "EnableReachabilityAnalyzerOrganizationSharingResponse":
        """
        Creates the response from the parsed XML document, f.e.
        ``{"ReturnValue": "true", "ResponseMetadata": {"RequestId": "..."}}``.
        """
        result = cls()
        if "ReturnValue" in document:
            result = result.with_return_value(_parse_boolean(document["ReturnValue"]))
        request_id = (document.get("ResponseMetadata") or {}).get("RequestId")
        if request_id:
            result = result.with_response_metadata(ResponseMetadata(request_id=request_id))
        return result


def _parse_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"
