"""Turn captured ``llvm-config`` stdout into strings, paths or words."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from llvm_config.errors import Utf8Error
from llvm_config.process import CapturedOutput, CommandArg, run
from llvm_config.tokenizer import SpaceSeparatedStrings

T = TypeVar("T")


def map_stdout(args: Iterable[CommandArg], transform: Callable[[str], T]) -> T:
    """Invoke ``llvm-config`` then pass its trimmed stdout to ``transform``."""

    stdout = _decode_stdout(run(args))
    return transform(stdout.strip())


def stdout_words(args: Iterable[CommandArg]) -> Iterator[str]:
    """Invoke ``llvm-config`` then lazily split its stdout on whitespace."""

    return SpaceSeparatedStrings(_decode_stdout(run(args)))


def _decode_stdout(output: CapturedOutput) -> str:
    try:
        return output.stdout.decode("utf-8")
    except UnicodeDecodeError as error:
        raise Utf8Error(error) from error
