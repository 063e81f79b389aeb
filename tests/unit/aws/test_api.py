import pytest

from clientstack.aws.api import (
    AsyncCallerContext,
    AwsError,
    CommonServiceException,
    ErrorKind,
    Outcome,
    RequestContext,
    missing_parameter,
)
from clientstack.aws.spec import load_service


class TestOutcome:
    def test_success(self):
        outcome = Outcome.success({"Foo": "bar"})

        assert outcome.is_success
        assert outcome.result == {"Foo": "bar"}
        assert outcome.error is None
        assert outcome.get_result() == {"Foo": "bar"}

    def test_failure(self):
        error = AwsError(ErrorKind.SERVICE, "ValidationException", "invalid", status_code=400)
        outcome = Outcome.failure(error)

        assert not outcome.is_success
        assert outcome.result is None
        assert outcome.error is error

        with pytest.raises(CommonServiceException) as e:
            outcome.get_result()
        assert e.value.code == "ValidationException"
        assert e.value.message == "invalid"
        assert e.value.kind == ErrorKind.SERVICE

    def test_equality(self):
        assert Outcome.success({"a": 1}) == Outcome.success({"a": 1})
        assert Outcome.success({"a": 1}) != Outcome.success({"a": 2})
        assert Outcome.failure(missing_parameter("Name")) == Outcome.failure(
            missing_parameter("Name")
        )
        assert Outcome.success(None) != Outcome.failure(missing_parameter("Name"))

    def test_result_and_error(self):
        with pytest.raises(ValueError):
            Outcome(result={}, error=missing_parameter("Name"))


class TestAwsError:
    def test_missing_parameter(self):
        error = missing_parameter("Project")

        assert error.kind == ErrorKind.MISSING_PARAMETER
        assert error.code == "MISSING_PARAMETER"
        assert error.message == "Missing required field [Project]"
        assert not error.retryable
        assert error.sender_fault

    @pytest.mark.parametrize(
        "kind,status_code,sender_fault",
        [
            (ErrorKind.SERVICE, 400, True),
            (ErrorKind.SERVICE, 500, False),
            (ErrorKind.NETWORK_CONNECTION, None, False),
            (ErrorKind.CLIENT_SIGNING_FAILURE, None, True),
        ],
    )
    def test_sender_fault(self, kind, status_code, sender_fault):
        assert AwsError(kind, "Code", "message", status_code=status_code).sender_fault == sender_fault

    def test_to_exception(self):
        error = AwsError(
            ErrorKind.SERVICE,
            "ThrottlingException",
            "Rate exceeded",
            status_code=400,
            retryable=True,
            request_id="request-1",
        )

        exception = error.to_exception()

        assert str(exception) == "Rate exceeded"
        assert exception.status_code == 400
        assert exception.sender_fault
        assert exception.retryable
        assert exception.request_id == "request-1"


def test_async_caller_context():
    first = AsyncCallerContext()
    second = AsyncCallerContext()

    assert first.uuid != second.uuid
    assert AsyncCallerContext("my-id", attempt=2).attempt == 2


def test_request_context():
    context = RequestContext()
    assert context.service_operation is None

    context.service = load_service("evidently")
    context.operation = context.service.operation_model("GetProject")

    assert context.service_operation == ("evidently", "GetProject")
