import os

import clientstack

# clientstack version
VERSION = clientstack.__version__

# folder for user profiles with environment overrides (see config.load_environment)
CONFIG_DIR = os.environ.get("CLIENTSTACK_CONFIG_DIR") or os.path.join(
    os.path.expanduser("~"), ".clientstack"
)

# strings to indicate truthy/falsy values
TRUE_STRINGS = ("1", "true", "True")
FALSE_STRINGS = ("0", "false", "False")
# strings with valid log levels for CS_LOG
LOG_LEVELS = ("trace", "debug", "info", "warn", "error", "warning")

# trace log level, configurable via $CS_LOG
CS_LOG_TRACE = "trace"
TRACE_LOG_LEVELS = [CS_LOG_TRACE]

# AWS region us-east-1
AWS_REGION_US_EAST_1 = "us-east-1"
# pseudo region of global endpoints, signed as us-east-1
AWS_REGION_GLOBAL = "aws-global"

# default number of worker threads used by the callable and async calling conventions
DEFAULT_MAX_WORKERS = 8

# default timeouts (in seconds) of the HTTP transport
DEFAULT_CONNECT_TIMEOUT = 1.0
DEFAULT_REQUEST_TIMEOUT = 3.0

# content types
APPLICATION_JSON = "application/json"
APPLICATION_AMZ_JSON_1_1 = "application/x-amz-json-1.1"
APPLICATION_X_WWW_FORM_URLENCODED = "application/x-www-form-urlencoded; charset=utf-8"

# HTTP headers
HEADER_AMZ_TARGET = "X-Amz-Target"
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT_ENCODING = "Accept-Encoding"
