"""Errors raised while invoking ``llvm-config`` and decoding its output.

The three subclasses of :class:`LlvmConfigError` are the only failure modes
of the library. Callers can tell a missing tool, a failing tool and garbage
output apart by type and show ``str(error)`` to the user as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from llvm_config.process import CapturedOutput

LLVM_CONFIG = "llvm-config"


class LlvmConfigError(Exception):
    """An error that may occur while trying to use ``llvm-config``."""


class Utf8Error(LlvmConfigError):
    """The output wasn't valid UTF-8."""

    def __init__(self, error: UnicodeDecodeError) -> None:
        super().__init__("The output wasn't valid UTF-8")
        self.error = error


class UnableToInvokeError(LlvmConfigError):
    """The ``llvm-config`` process could not be started."""

    def __init__(self, error: OSError) -> None:
        super().__init__(
            f"Unable to invoke {LLVM_CONFIG}. Is it installed and on your $PATH?",
        )
        self.error = error


class BadExitCodeError(LlvmConfigError):
    """The command ran to completion but finished with an unsuccessful status."""

    def __init__(self, output: CapturedOutput) -> None:
        message = f"{LLVM_CONFIG} ran unsuccessfully"
        if output.exit_code is not None:
            message += f" with exit code {output.exit_code}"
        super().__init__(message)
        self.output = output
