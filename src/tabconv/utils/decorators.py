#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/utils/decorators.py
"""Utility decorators for tabconv parsers and renderers.

The readers and serializers that back the XLSX, YAML and TOML paths are
imported lazily inside the decorated methods. They are hard requirements of
the package, so ``requires_dependencies`` only fires on a broken or
hand-pruned environment; there it turns the bare ImportError into a
DependencyError with an install hint and a distinct exit code.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from tabconv.exceptions import DependencyError
from tabconv.utils.packages import check_version_requirement


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the converter (e.g., "xlsx", "yaml"). Appears in error messages.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "pyyaml")
        - import_name: Module name for import statement (e.g., "yaml")
        - version_spec: Version requirement (e.g., ">=6.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("yaml", [("pyyaml", "yaml", ">=6.0")])
        ... def render_to_string(self, table):
        ...     import yaml
        ...     return yaml.dump(...)

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e
                    continue

                if version_spec:
                    meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                    if not meets_requirement:
                        version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Sheet 'Data'")

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Reading workbook"):
        ...     rows = reader.read_sheet("Data")
        ... # Logs: "Reading workbook completed in 0.12s" at DEBUG level

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
