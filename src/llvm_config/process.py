"""Run ``llvm-config`` as a child process and capture what it prints."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass

from llvm_config.errors import LLVM_CONFIG, BadExitCodeError, UnableToInvokeError

logger = logging.getLogger(__name__)

CommandArg = str | os.PathLike[str]


@dataclass(frozen=True, slots=True)
class CapturedOutput:
    """Everything a finished ``llvm-config`` run left behind."""

    args: tuple[str, ...]
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def exit_code(self) -> int | None:
        """Numeric exit code, or ``None`` when the process was killed by a signal."""

        if self.returncode < 0:
            return None
        return self.returncode


def run(args: Iterable[CommandArg], *, executable: str = LLVM_CONFIG) -> CapturedOutput:
    """Invoke ``executable`` with ``args`` and wait for it to finish.

    Each argument is passed through verbatim as its own argv entry; no shell
    is involved. Standard input is closed so the tool can never wait for
    input.

    Raises:
        UnableToInvokeError: If the process could not be started.
        BadExitCodeError: If the process exited with a non-zero status or was
            killed by a signal. The captured output is attached to the error.
    """

    argv = [executable, *(os.fspath(arg) for arg in args)]
    logger.debug("Invoking %s", argv)

    try:
        completed = subprocess.run(  # noqa: S603
            argv,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as error:
        logger.warning("Failed to start %s: %s", executable, error)
        raise UnableToInvokeError(error) from error

    output = CapturedOutput(
        args=tuple(argv),
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
    if not output.success:
        logger.warning("%s exited with status %s", executable, output.returncode)
        logger.debug("%s stderr: %r", executable, output.stderr)
        raise BadExitCodeError(output)
    return output
