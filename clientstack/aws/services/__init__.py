from .directory_service import DirectoryServiceClient
from .ec2 import EC2Client
from .evidently import CloudWatchEvidentlyClient
from .personalize import PersonalizeClient
from .pinpoint_email import PinpointEmailClient
from .workdocs import WorkDocsClient
from .workspaces import WorkSpacesClient

__all__ = [
    "CloudWatchEvidentlyClient",
    "DirectoryServiceClient",
    "EC2Client",
    "PersonalizeClient",
    "PinpointEmailClient",
    "WorkDocsClient",
    "WorkSpacesClient",
]
