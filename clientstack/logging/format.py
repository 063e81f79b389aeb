"""Tools for formatting clientstack logs."""
import logging
from functools import lru_cache
from typing import Any, Mapping

PACKAGE_PREFIX = "clientstack."

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB")

MAX_THREAD_NAME_LEN = 12
MAX_NAME_LEN = 26

LOG_FORMAT = f"%(asctime)s.%(msecs)03d %(cs_level)5s --- [%(cs_thread){MAX_THREAD_NAME_LEN}s] %(cs_name)-{MAX_NAME_LEN}s : %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

LEVEL_NAMES = {
    logging.CRITICAL: "FATAL",
    logging.WARNING: "WARN",
}


@lru_cache(maxsize=256)
def shorten_logger_name(name: str, length: int) -> str:
    """
    Creates a short version of a logger name. Loggers of this package lose the ``clientstack.`` prefix, then the
    leading parts are cut to their first letter one at a time until the name fits, f.e.
    ``clientstack.aws.protocol.serializer`` turns into ``a.p.serializer`` with length=20. If even that is too long,
    the last part is truncated.

    :param name: the logger name
    :param length: the max length of the logger name
    :return: the shortened name
    """
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX) :]
    if len(name) <= length:
        return name

    parts = name.split(".")
    for i in range(len(parts) - 1):
        parts[i] = parts[i][0]
        shortened = ".".join(parts)
        if len(shortened) <= length:
            return shortened

    return parts[-1][:length]


class DefaultFormatter(logging.Formatter):
    """
    A formatter that uses ``LOG_FORMAT`` and ``LOG_DATE_FORMAT``, and sets the record attributes the format refers
    to:

    - cs_level: the level name, at most 5 characters long
    - cs_name: the shortened logger name (e.g., ``aws.client``)
    - cs_thread: the end of the thread name (e.g., ``tly-client_3`` of a worker thread of the Evidently client)
    """

    def __init__(
        self,
        fmt: str = LOG_FORMAT,
        datefmt: str = LOG_DATE_FORMAT,
        max_name_len: int = MAX_NAME_LEN,
        max_thread_len: int = MAX_THREAD_NAME_LEN,
    ):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.max_name_len = max_name_len
        self.max_thread_len = max_thread_len

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.cs_level = LEVEL_NAMES.get(record.levelno, record.levelname)
        record.cs_name = shorten_logger_name(record.name, self.max_name_len)
        record.cs_thread = record.threadName[-self.max_thread_len :]
        return super().formatMessage(record)


class RequestTraceFormatter(DefaultFormatter):
    """
    Formatter for the ``clientstack.request`` logger, which logs one record per dispatched operation with the
    ``operation``, ``input``, ``output_type`` and ``output`` attributes set as ``extra`` of the log call. Credentials
    sent as request members are masked, large blobs are replaced by their size.
    """

    trace_log_format = LOG_FORMAT + "; %(operation)s(%(input)s); %(output_type)s(%(output)s)"
    bytes_length_display_threshold = 512
    redacted_members = frozenset({"AuthenticationToken"})

    def __init__(self):
        super().__init__(fmt=self.trace_log_format)

    def format(self, record: logging.LogRecord) -> str:
        record.input = self._summarize(getattr(record, "input", None))
        record.output = self._summarize(getattr(record, "output", None))
        if not hasattr(record, "operation"):
            record.operation = "?"
        if not hasattr(record, "output_type"):
            record.output_type = type(record.output).__name__
        return super().format(record)

    def _summarize(self, value: Any, member: str = None) -> Any:
        if member in self.redacted_members and value is not None:
            return "****"
        if isinstance(value, Mapping):
            return {key: self._summarize(item, key) for key, item in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._summarize(item) for item in value]
        if isinstance(value, (bytes, bytearray)) and len(value) > self.bytes_length_display_threshold:
            return f"Bytes({_format_size(len(value))})"
        return value


def _format_size(size: int) -> str:
    """Human-readable size with decimal units, f.e. ``1.024KB`` for 1024 bytes."""
    value = float(size)
    for unit in BYTE_UNITS:
        if value < 1000 or unit == BYTE_UNITS[-1]:
            return f"{value:.3f}".rstrip("0").rstrip(".") + unit
        value /= 1000.0
