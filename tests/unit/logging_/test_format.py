import logging

import pytest

from clientstack.logging.format import DefaultFormatter, RequestTraceFormatter, shorten_logger_name


def _record(name="clientstack.aws.client", msg="hello", level=logging.INFO, **extra):
    record = logging.LogRecord(name, level, __file__, 1, msg, None, None)
    record.threadName = "evidently-client_3"
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.parametrize(
    "name,length,expected",
    [
        ("clientstack.aws.client", 26, "aws.client"),
        ("clientstack.request", 26, "request"),
        ("clientstack", 26, "clientstack"),
        ("clientstack.aws.protocol.serializer", 23, "aws.protocol.serializer"),
        ("clientstack.aws.protocol.serializer", 20, "a.p.serializer"),
        ("clientstack.aws.protocol.serializer", 21, "a.protocol.serializer"),
        ("botocore.credentials", 26, "botocore.credentials"),
        ("urllib3.connectionpool", 16, "u.connectionpool"),
        ("urllib3.connectionpool", 12, "connectionpo"),
        ("clientstack", 5, "clien"),
    ],
)
def test_shorten_logger_name(name, length, expected):
    assert shorten_logger_name(name, length) == expected


def test_default_formatter():
    line = DefaultFormatter().format(_record())

    assert line.endswith(f" INFO --- [tly-client_3] {'aws.client':<26} : hello")


@pytest.mark.parametrize(
    "level,level_name",
    [
        (logging.CRITICAL, "FATAL"),
        (logging.ERROR, "ERROR"),
        (logging.WARNING, "WARN"),
        (logging.DEBUG, "DEBUG"),
    ],
)
def test_default_formatter_level_names(level, level_name):
    record = _record(level=level)

    DefaultFormatter(max_name_len=20, max_thread_len=8).format(record)

    assert record.cs_level == level_name
    assert record.cs_thread == "client_3"


def test_request_trace_formatter():
    record = _record(
        name="clientstack.request",
        msg="AWS evidently.GetProject => success",
        operation="evidently.GetProject",
        input={"Project": "p1", "payload": {"blob": b"x" * 1024, "names": ("a",)}},
        output_type="dict",
        output={"project": {"name": "p1"}},
    )

    line = RequestTraceFormatter().format(record)

    assert f"] {'request':<26} : AWS evidently.GetProject => success; evidently.GetProject(" in line
    assert "'blob': 'Bytes(1.024KB)'" in line
    assert "'names': ['a']" in line
    assert line.endswith("; dict({'project': {'name': 'p1'}})")


def test_request_trace_formatter_masks_credentials():
    record = _record(
        name="clientstack.request",
        msg="AWS workdocs.GetCurrentUser => success",
        operation="workdocs.GetCurrentUser",
        input={"AuthenticationToken": "secret-token", "Limit": 1},
        output_type="dict",
        output={},
    )

    line = RequestTraceFormatter().format(record)

    assert "secret-token" not in line
    assert "workdocs.GetCurrentUser({'AuthenticationToken': '****', 'Limit': 1})" in line


def test_request_trace_formatter_without_extras():
    line = RequestTraceFormatter().format(_record(name="clientstack.request", msg="plain"))

    assert line.endswith("plain; ?(None); NoneType(None)")
