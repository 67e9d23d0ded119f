"""Runtime dependency checks for CLI commands."""

from __future__ import annotations

import importlib.util
import shutil
from typing import TYPE_CHECKING

from poppler_pages.exceptions import DependencyError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from poppler_pages.typing.enums import PopplerTool
    from poppler_pages.typing.protocol import ExecutableResolver


def _is_module_available(module_name: str) -> bool:
    """Check whether a module can be imported.

    Args:
        module_name (str): Python module name.

    Returns:
        bool: True if import spec exists.
    """
    return importlib.util.find_spec(module_name) is not None


def _is_executable_available(executable: str) -> bool:
    """Check whether an executable can be found on disk or on `PATH`.

    Args:
        executable (str): Executable path or bare name.

    Returns:
        bool: True if the executable resolves.
    """
    return shutil.which(executable) is not None


def _collect_missing_dependencies(modules_by_package: dict[str, str]) -> list[str]:
    """Collect missing packages for a module mapping.

    Args:
        modules_by_package (Mapping[str, str]): Mapping of package name -> import module.

    Returns:
        list[str]: Missing package names.
    """
    return [package for package, module in modules_by_package.items() if not _is_module_available(module)]


def ensure_cli_dependencies_for_render() -> None:
    """Validate required Python dependencies for `poppler-pages render`.

    Raises:
        DependencyError: If one or more required modules are missing.
    """
    missing = _collect_missing_dependencies({"pillow": "PIL"})
    if missing:
        raise DependencyError(missing_package=missing, message="render")


def ensure_poppler_tools(resolver: ExecutableResolver, tools: Iterable[PopplerTool]) -> None:
    """Validate that the poppler executables needed by a command exist.

    Args:
        resolver (ExecutableResolver): Resolver applied to each tool name.
        tools (Iterable[PopplerTool]): Tools the command will spawn.

    Raises:
        DependencyError: If any resolved executable cannot be found.
    """
    missing = [resolver(tool.value) for tool in tools if not _is_executable_available(resolver(tool.value))]
    if missing:
        raise DependencyError(missing_package=missing, message="poppler tools")
