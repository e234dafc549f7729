"""Thin wrapper around the ``llvm-config`` tool.

Meant for build scripts that need LLVM paths and flags but do not want to
parse the tool's output and handle its failures at every call site::

    import llvm_config

    include = llvm_config.include_dir()
    flags = list(llvm_config.cxx_flags())
"""

from importlib.metadata import PackageNotFoundError, version as _distribution_version

try:
    __version__: str = _distribution_version("llvm-config-py")
except PackageNotFoundError:
    __version__ = "0.0.0"

from llvm_config.errors import (  # noqa: E402
    BadExitCodeError,
    LlvmConfigError,
    UnableToInvokeError,
    Utf8Error,
)
from llvm_config.process import CapturedOutput  # noqa: E402
from llvm_config.queries import (  # noqa: E402
    assertion_mode,
    bin_dir,
    build_mode,
    c_flags,
    cmake_dir,
    components,
    cpp_flags,
    cxx_flags,
    has_rtti,
    host_target,
    include_dir,
    ldflags,
    lib_dir,
    libfiles,
    libnames,
    libs,
    obj_root,
    prefix,
    shared_mode,
    src_root,
    system_libs,
    targets_built,
    version,
)
from llvm_config.tokenizer import SpaceSeparatedStrings  # noqa: E402

__all__ = [
    "BadExitCodeError",
    "CapturedOutput",
    "LlvmConfigError",
    "SpaceSeparatedStrings",
    "UnableToInvokeError",
    "Utf8Error",
    "__version__",
    "assertion_mode",
    "bin_dir",
    "build_mode",
    "c_flags",
    "cmake_dir",
    "components",
    "cpp_flags",
    "cxx_flags",
    "has_rtti",
    "host_target",
    "include_dir",
    "ldflags",
    "lib_dir",
    "libfiles",
    "libnames",
    "libs",
    "obj_root",
    "prefix",
    "shared_mode",
    "src_root",
    "system_libs",
    "targets_built",
    "version",
]
