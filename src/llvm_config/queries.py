"""One function per ``llvm-config`` flag.

Every call starts a fresh ``llvm-config`` process; nothing is cached.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

from llvm_config.decoding import map_stdout, stdout_words


def version() -> str:
    """Print LLVM version."""
    return map_stdout(["--version"], str)


def prefix() -> Path:
    """Print the installation prefix."""
    return map_stdout(["--prefix"], Path)


def src_root() -> Path:
    """Print the source root LLVM was built from."""
    return map_stdout(["--src-root"], Path)


def obj_root() -> Path:
    """Print the object root used to build LLVM."""
    return map_stdout(["--obj-root"], Path)


def bin_dir() -> Path:
    """Directory containing LLVM executables."""
    return map_stdout(["--bin-dir"], Path)


def include_dir() -> Path:
    """Directory containing LLVM headers."""
    return map_stdout(["--include-dir"], Path)


def lib_dir() -> Path:
    """Directory containing LLVM libraries."""
    return map_stdout(["--lib-dir"], Path)


def cmake_dir() -> Path:
    """Directory containing LLVM cmake modules."""
    return map_stdout(["--cmake-dir"], Path)


def cpp_flags() -> Iterator[str]:
    """C preprocessor flags for files that include LLVM headers."""
    return stdout_words(["--cppflags"])


def c_flags() -> Iterator[str]:
    """C compiler flags for files that include LLVM headers."""
    return stdout_words(["--cflags"])


def cxx_flags() -> Iterator[str]:
    """C++ compiler flags for files that include LLVM headers."""
    return stdout_words(["--cxxflags"])


def ldflags() -> Iterator[str]:
    """Print Linker flags."""
    return stdout_words(["--ldflags"])


def system_libs() -> Iterator[str]:
    """System Libraries needed to link against LLVM components."""
    return stdout_words(["--system-libs"])


def libs() -> Iterator[str]:
    """Libraries needed to link against LLVM components."""
    return stdout_words(["--libs"])


def libnames() -> str:
    """Bare library names for in-tree builds."""
    return map_stdout(["--libnames"], str)


def libfiles() -> Iterator[str]:
    """Fully qualified library filenames for makefile depends."""
    return stdout_words(["--libfiles"])


def components() -> Iterator[str]:
    """List of all possible components."""
    return stdout_words(["--components"])


def targets_built() -> Iterator[str]:
    """List of all targets currently built."""
    return stdout_words(["--targets-built"])


def host_target() -> str:
    """Target triple used to configure LLVM."""
    return map_stdout(["--host-target"], str)


def build_mode() -> str:
    """Build mode of LLVM tree (e.g. Debug or Release)."""
    return map_stdout(["--build-mode"], str)


def shared_mode() -> str:
    """How the tools are linked to the LLVM libraries (``shared`` or ``static``)."""
    return map_stdout(["--shared-mode"], str)


def assertion_mode() -> bool:
    """Whether LLVM was built with assertions enabled."""
    return map_stdout(["--assertion-mode"], lambda text: text == "ON")


def has_rtti() -> bool:
    """Whether LLVM was built with RTTI."""
    return map_stdout(["--has-rtti"], lambda text: text == "YES")


QUERIES: dict[str, Callable[[], object]] = {
    "version": version,
    "prefix": prefix,
    "src-root": src_root,
    "obj-root": obj_root,
    "bin-dir": bin_dir,
    "include-dir": include_dir,
    "lib-dir": lib_dir,
    "cmake-dir": cmake_dir,
    "cpp-flags": cpp_flags,
    "c-flags": c_flags,
    "cxx-flags": cxx_flags,
    "ldflags": ldflags,
    "system-libs": system_libs,
    "libs": libs,
    "libnames": libnames,
    "libfiles": libfiles,
    "components": components,
    "targets-built": targets_built,
    "host-target": host_target,
    "build-mode": build_mode,
    "shared-mode": shared_mode,
    "assertion-mode": assertion_mode,
    "has-rtti": has_rtti,
}

TOKENIZED_QUERIES: frozenset[str] = frozenset(
    {
        "cpp-flags",
        "c-flags",
        "cxx-flags",
        "ldflags",
        "system-libs",
        "libs",
        "libfiles",
        "components",
        "targets-built",
    },
)
