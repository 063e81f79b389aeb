import abc
import logging
import threading
from typing import Callable, Optional

import boto3
import botocore.auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials, ReadOnlyCredentials
from botocore.exceptions import BotoCoreError

from clientstack.aws.endpoints import compute_signer_region

LOG = logging.getLogger(__name__)

CredentialsProvider = Callable[[], Optional[Credentials]]


class SigningError(Exception):
    pass


class Signer(abc.ABC):
    """Signs a request in place before it is sent."""

    @abc.abstractmethod
    def sign(self, request: AWSRequest, region: str = None, service_name: str = None) -> None:
        """
        :param request: the request to sign, including all headers and the final body
        :param region: the endpoint region, defaults to the signer's region
        :param service_name: the signing name, defaults to the signer's signing name
        :raises SigningError: if the request cannot be signed
        """
        raise NotImplementedError


class NoOpSigner(Signer):
    """Leaves requests unsigned."""

    def sign(self, request: AWSRequest, region: str = None, service_name: str = None) -> None:
        pass


class SessionCredentialsProvider:
    """
    Looks up credentials through the boto3 credential chain (environment, shared credentials and config files,
    container and instance metadata) of the given profile. The session is created on first use.
    """

    def __init__(self, profile: str = None):
        self.profile = profile
        self._session: Optional[boto3.session.Session] = None
        self._mutex = threading.RLock()

    def __call__(self) -> Optional[Credentials]:
        with self._mutex:
            if self._session is None:
                self._session = boto3.session.Session(profile_name=self.profile)
            return self._session.get_credentials()


class StaticCredentialsProvider:
    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    def __call__(self) -> Optional[Credentials]:
        return self.credentials


class SigV4Signer(Signer):
    """
    Signs requests with AWS Signature Version 4 (``botocore.auth.SigV4Auth``), for the region computed by
    ``compute_signer_region``.
    """

    def __init__(self, credentials_provider: CredentialsProvider, signing_name: str, region: str = None):
        self.credentials_provider = credentials_provider
        self.signing_name = signing_name
        self.region = region

    def _get_frozen_credentials(self) -> ReadOnlyCredentials:
        try:
            credentials = self.credentials_provider()
        except BotoCoreError as e:
            raise SigningError(f"Unable to load credentials: {e}") from e

        if credentials is None:
            raise SigningError("Unable to locate credentials")

        frozen = credentials.get_frozen_credentials()
        if not frozen.access_key or not frozen.secret_key:
            raise SigningError("Credentials are missing an access key or secret key")
        return frozen

    def sign(self, request: AWSRequest, region: str = None, service_name: str = None) -> None:
        credentials = self._get_frozen_credentials()
        signing_region = compute_signer_region(region or self.region)
        if not signing_region:
            raise SigningError("Unable to sign request without a region")

        signing_name = service_name or self.signing_name
        auth = botocore.auth.SigV4Auth(credentials, signing_name, signing_region)
        try:
            auth.add_auth(request)
        except BotoCoreError as e:
            raise SigningError(str(e)) from e

        LOG.debug(
            "Signed request %s %s for %s in %s",
            request.method,
            request.url,
            signing_name,
            signing_region,
        )
