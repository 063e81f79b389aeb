import threading
from typing import Callable, List, Optional, Union

from botocore.awsrequest import AWSPreparedRequest

from clientstack.http import HttpClient, Response

ResponseFactory = Callable[[AWSPreparedRequest], Response]


class RecordingHttpClient(HttpClient):
    """
    An in-memory ``HttpClient`` which records every request it receives and answers with a fixed response, or with
    the response created by a factory from the request. If the factory raises, the exception is raised to the
    dispatcher just like a transport error.
    """

    requests: List[AWSPreparedRequest]

    def __init__(self, response: Union[Response, ResponseFactory] = None):
        self.requests = []
        self._response = response
        self._mutex = threading.Lock()
        self.closed = False

    @property
    def last_request(self) -> Optional[AWSPreparedRequest]:
        with self._mutex:
            return self.requests[-1] if self.requests else None

    def respond_with(self, response: Union[Response, ResponseFactory]) -> None:
        self._response = response

    def request(self, request: AWSPreparedRequest) -> Response:
        with self._mutex:
            self.requests.append(request)

        if callable(self._response) and not isinstance(self._response, Response):
            return self._response(request)
        if self._response is not None:
            return self._response
        return Response.for_json({}, status=200)

    def close(self):
        self.closed = True
