import logging
import os
import time
from typing import List, Optional, Union

from clientstack import constants
from clientstack.constants import (
    CONFIG_DIR,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_WORKERS,
    DEFAULT_REQUEST_TIMEOUT,
    FALSE_STRINGS,
    LOG_LEVELS,
    TRACE_LOG_LEVELS,
    TRUE_STRINGS,
)

# keep track of start time, for performance debugging
load_start_time = time.time()


def eval_log_type(env_var_name: str) -> Union[str, bool]:
    """Get the log type from environment variable"""
    cs_log = os.environ.get(env_var_name, "").lower().strip()
    return cs_log if cs_log in LOG_LEVELS else False


def parse_boolean_env(env_var_name: str) -> Optional[bool]:
    """Parse the value of the given env variable and return True/False, or None if it is not a boolean value."""
    value = os.environ.get(env_var_name, "").lower().strip()
    if value in TRUE_STRINGS:
        return True
    if value in FALSE_STRINGS:
        return False
    return None


def is_env_true(env_var_name: str) -> bool:
    """Whether the given environment variable has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() in TRUE_STRINGS


def is_env_not_false(env_var_name: str) -> bool:
    """Whether the given environment variable is empty or has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() not in FALSE_STRINGS


def parse_number_env(env_var_name: str, default: float, cast=float) -> float:
    """Parse the given env variable as a number, falling back to ``default`` if it is unset or invalid."""
    value = os.environ.get(env_var_name, "").strip()
    if not value:
        return default
    try:
        return cast(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Invalid value %r for %s, using default %s", value, env_var_name, default
        )
        return default


def load_environment(profiles: str = None, env=os.environ) -> List[str]:
    """Loads the environment variables from ~/.clientstack/{profile}.env, for each profile listed in the profiles.
    :param env: environment to load profile to. Defaults to `os.environ`
    :param profiles: a comma separated list of profiles to load (defaults to "default")
    :returns str: the list of the actually loaded profiles (might be the fallback)
    """
    if not profiles:
        profiles = "default"

    profiles = [profile.strip() for profile in profiles.split(",")]
    environment = {}
    import dotenv

    for profile in profiles:
        path = os.path.join(CONFIG_DIR, f"{profile}.env")
        if not os.path.exists(path):
            continue
        environment.update(dotenv.dotenv_values(path))

    for k, v in environment.items():
        # we do not want to override the environment
        if k not in env and v is not None:
            env[k] = v

    return profiles


# comma-separated profiles in CONFIG_DIR whose variables are added to the environment, before any other
# setting is read
CONFIG_PROFILE = os.environ.get("CLIENTSTACK_PROFILE", "").strip() or None
load_environment(CONFIG_PROFILE)

# whether to enable debug mode
DEBUG = is_env_true("DEBUG")

# log level, one of LOG_LEVELS
CS_LOG = eval_log_type("CS_LOG")

# default region of new clients (same lookup order as the AWS CLI)
AWS_REGION = (
    os.environ.get("AWS_REGION", "").strip() or os.environ.get("AWS_DEFAULT_REGION", "").strip()
)

# named profile of the boto3 credentials chain
AWS_PROFILE = os.environ.get("AWS_PROFILE", "").strip() or None

# endpoint variants
USE_FIPS_ENDPOINT = is_env_true("AWS_USE_FIPS_ENDPOINT")
USE_DUALSTACK_ENDPOINT = is_env_true("AWS_USE_DUALSTACK_ENDPOINT")

# custom endpoint for all clients (e.g., a local emulator)
ENDPOINT_URL = os.environ.get("AWS_ENDPOINT_URL", "").strip() or None

# size of the worker pool that runs callable and async operations
MAX_WORKERS = int(parse_number_env("CLIENTSTACK_MAX_WORKERS", DEFAULT_MAX_WORKERS, cast=int))

# transport timeouts in seconds
CONNECT_TIMEOUT = parse_number_env("CLIENTSTACK_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)
REQUEST_TIMEOUT = parse_number_env("CLIENTSTACK_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)

# whether to verify TLS certificates of the endpoints
VERIFY_SSL = is_env_not_false("CLIENTSTACK_VERIFY_SSL")

# whether operations with a host prefix (e.g. "dataplane.") modify the endpoint host
ENABLE_HOST_PREFIX_INJECTION = is_env_not_false("CLIENTSTACK_ENABLE_HOST_PREFIX_INJECTION")


def is_trace_logging_enabled():
    if CS_LOG:
        log_level = str(CS_LOG).upper()
        return log_level.lower() in TRACE_LOG_LEVELS
    return False


# set log levels immediately, but will be overwritten later by setup_logging
if DEBUG:
    logging.getLogger("").setLevel(logging.DEBUG)
    logging.getLogger("clientstack").setLevel(logging.DEBUG)

LOG = logging.getLogger(__name__)
if is_trace_logging_enabled():
    load_end_time = time.time()
    LOG.debug(
        "Initializing the configuration took %s ms", int((load_end_time - load_start_time) * 1000)
    )
    LOG.debug("clientstack %s", constants.VERSION)
