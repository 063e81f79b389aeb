import json
from typing import Any

from werkzeug.wrappers import Response as WerkzeugResponse

from clientstack.utils.json import CustomEncoder


class Response(WerkzeugResponse):
    """
    An HTTP Response object, which simply extends werkzeug's Response object with a few convenience methods.
    """

    def set_json(self, doc: Any):
        """
        Serializes the given dictionary using clientstack's ``CustomEncoder`` into a json response, and sets the
        mimetype automatically to ``application/json``.

        :param doc: the response dictionary to be serialized as JSON
        """
        self.data = json.dumps(doc, cls=CustomEncoder)
        self.mimetype = "application/json"

    @classmethod
    def for_json(cls, doc: Any, *args, **kwargs) -> "Response":
        """
        Creates a new JSON response from the given document. It automatically sets the mimetype to ``application/json``.

        :param doc: the document to serialize into JSON
        :param args: arguments passed to the ``Response`` constructor
        :param kwargs: keyword arguments passed to the ``Response`` constructor
        :return: a new Response object
        """
        response = cls(*args, **kwargs)
        response.set_json(doc)
        return response
