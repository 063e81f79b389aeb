import abc
import logging
from typing import Optional, Tuple

import requests
from botocore.awsrequest import AWSPreparedRequest
from werkzeug.datastructures import Headers

from clientstack.constants import HEADER_ACCEPT_ENCODING

from .response import Response

LOG = logging.getLogger(__name__)


class HttpClient(abc.ABC):
    """
    An HTTP client that sends signed, prepared AWS requests and returns werkzeug-based responses.
    """

    def request(self, request: AWSPreparedRequest) -> Response:
        """
        Make the given HTTP request as a client.

        :param request: the prepared (and usually signed) request to send
        :return: the response.
        :raises requests.RequestException: if the request could not be sent or the response not received
        """
        raise NotImplementedError

    def close(self):
        """
        Close any underlying resources the client may need.
        """
        pass

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class _VerifyRespectingSession(requests.Session):
    """
    A class which wraps requests.Session to circumvent https://github.com/psf/requests/issues/3829.
    This ensures that if `REQUESTS_CA_BUNDLE` or `CURL_CA_BUNDLE` are set, the request does not perform the TLS
    verification if `session.verify` is set to `False.
    """

    def merge_environment_settings(self, url, proxies, stream, verify, *args, **kwargs):
        if self.verify is False:
            verify = False

        return super(_VerifyRespectingSession, self).merge_environment_settings(
            url, proxies, stream, verify, *args, **kwargs
        )


class SimpleRequestsClient(HttpClient):
    session: requests.Session
    timeout: Optional[Tuple[float, float]]

    def __init__(
        self,
        session: requests.Session = None,
        connect_timeout: float = None,
        request_timeout: float = None,
        verify: bool = True,
    ):
        self.session = session or _VerifyRespectingSession()
        self.session.verify = verify
        if connect_timeout is None and request_timeout is None:
            self.timeout = None
        else:
            self.timeout = (connect_timeout, request_timeout)

    def request(self, request: AWSPreparedRequest) -> Response:
        """
        Sends the prepared request using the requests library. The URL is used verbatim, since the signature
        covers the exact (already encoded) path and query string.

        :param request: the request to perform
        :return: the response.
        """
        headers = dict(request.headers.items())

        # urllib3 would add "Accept-Encoding: gzip,deflate" otherwise, which is not part of the signature
        if not any(key.lower() == HEADER_ACCEPT_ENCODING.lower() for key in headers):
            headers[HEADER_ACCEPT_ENCODING] = "identity"

        response = self.session.request(
            method=request.method,
            url=request.url,
            headers=headers,
            data=request.body,
            timeout=self.timeout,
            stream=False,
        )

        response_headers = Headers(dict(response.headers))
        if "chunked" in response_headers.get("Transfer-Encoding", ""):
            response_headers.pop("Content-Length", None)

        return Response(
            response=response.content,
            status=response.status_code,
            headers=response_headers,
        )

    def close(self):
        self.session.close()
