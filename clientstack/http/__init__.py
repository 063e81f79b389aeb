from .client import HttpClient, SimpleRequestsClient
from .response import Response

__all__ = [
    "HttpClient",
    "Response",
    "SimpleRequestsClient",
]
