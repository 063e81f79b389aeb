import dataclasses
from concurrent.futures import Executor
from typing import Optional

from clientstack import config as clientstack_config
from clientstack import constants


@dataclasses.dataclass(frozen=True)
class ClientConfiguration:
    """
    Immutable settings of a service client. Everything a client needs at dispatch time is taken from here (or from
    the collaborators built from it), the module-level settings in ``clientstack.config`` are only read by
    ``from_env``.
    """

    region: Optional[str] = None
    profile: Optional[str] = None
    use_fips: bool = False
    use_dual_stack: bool = False
    endpoint_url: Optional[str] = None
    executor: Optional[Executor] = dataclasses.field(default=None, compare=False)
    """Executor of the callable and async operations. If unset, each client creates its own worker pool."""
    max_workers: int = constants.DEFAULT_MAX_WORKERS
    connect_timeout: float = constants.DEFAULT_CONNECT_TIMEOUT
    request_timeout: float = constants.DEFAULT_REQUEST_TIMEOUT
    verify_ssl: bool = True
    enable_host_prefix_injection: bool = True
    user_agent: str = f"clientstack/{constants.VERSION}"

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfiguration":
        """
        Creates a configuration from the environment-based settings in ``clientstack.config``.

        :param overrides: fields that take precedence over the environment
        :return: a new configuration
        """
        values = dict(
            region=clientstack_config.AWS_REGION or None,
            profile=clientstack_config.AWS_PROFILE,
            use_fips=clientstack_config.USE_FIPS_ENDPOINT,
            use_dual_stack=clientstack_config.USE_DUALSTACK_ENDPOINT,
            endpoint_url=clientstack_config.ENDPOINT_URL,
            max_workers=clientstack_config.MAX_WORKERS,
            connect_timeout=clientstack_config.CONNECT_TIMEOUT,
            request_timeout=clientstack_config.REQUEST_TIMEOUT,
            verify_ssl=clientstack_config.VERIFY_SSL,
            enable_host_prefix_injection=clientstack_config.ENABLE_HOST_PREFIX_INJECTION,
        )
        values.update(overrides)
        return cls(**values)

    def replace(self, **changes) -> "ClientConfiguration":
        return dataclasses.replace(self, **changes)
