from __future__ import annotations

import allure
import pytest

from llvm_config.errors import (
    BadExitCodeError,
    LlvmConfigError,
    UnableToInvokeError,
    Utf8Error,
)
from llvm_config.process import CapturedOutput

pytestmark = [
    allure.epic("Process Invocation"),
    allure.feature("Error Model"),
]


def _captured(returncode: int, stderr: bytes = b"") -> CapturedOutput:
    return CapturedOutput(
        args=("llvm-config", "--libs"),
        returncode=returncode,
        stdout=b"",
        stderr=stderr,
    )


def test_decoding_error_message() -> None:
    cause = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    error = Utf8Error(cause)

    assert str(error) == "The output wasn't valid UTF-8"
    assert error.error is cause


def test_launch_failure_message_hints_at_path() -> None:
    cause = FileNotFoundError(2, "No such file or directory", "llvm-config")
    error = UnableToInvokeError(cause)

    assert str(error) == "Unable to invoke llvm-config. Is it installed and on your $PATH?"
    assert error.error is cause


def test_bad_exit_code_message_includes_code() -> None:
    error = BadExitCodeError(_captured(3, stderr=b"boom"))

    assert str(error) == "llvm-config ran unsuccessfully with exit code 3"
    assert error.output.stderr == b"boom"


def test_bad_exit_code_message_omits_code_for_signal() -> None:
    assert str(BadExitCodeError(_captured(-15))) == "llvm-config ran unsuccessfully"


@pytest.mark.parametrize(
    "error",
    [
        Utf8Error(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")),
        UnableToInvokeError(OSError("nope")),
        BadExitCodeError(_captured(1)),
    ],
)
def test_every_error_shares_one_base(error: LlvmConfigError) -> None:
    assert isinstance(error, LlvmConfigError)
    assert isinstance(error, Exception)


def test_error_family_is_closed() -> None:
    assert {cls.__name__ for cls in LlvmConfigError.__subclasses__()} == {
        "Utf8Error",
        "UnableToInvokeError",
        "BadExitCodeError",
    }
