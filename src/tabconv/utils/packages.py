#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tabconv/utils/packages.py
"""Installed-distribution lookups backing dependency checks and ``--about``."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import metadata
from typing import Optional, Tuple

from packaging import version
from packaging.specifiers import InvalidSpecifier, SpecifierSet

INSTALLED = "installed"
NOT_INSTALLED = "not installed"
VERSION_MISMATCH = "version mismatch"


@dataclass(frozen=True)
class DependencyStatus:
    """Installed state of one distribution against a requirement."""

    name: str
    required: str
    installed: Optional[str]
    status: str

    @property
    def ok(self) -> bool:
        return self.status == INSTALLED


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of distribution ``package_name``, or None."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check an installed distribution against a version specifier.

    Parameters
    ----------
    package_name : str
        Distribution name as used by pip (not the import name)
    version_spec : str
        Specifier such as ">=6.0"; an empty string accepts any version

    Returns
    -------
    tuple
        (meets_requirement, installed_version). An invalid specifier never
        meets the requirement.

    """
    installed_version = get_package_version(package_name)
    if installed_version is None:
        return False, None
    if not version_spec:
        return True, installed_version

    try:
        spec = SpecifierSet(version_spec)
    except InvalidSpecifier:
        return False, installed_version

    return version.parse(installed_version) in spec, installed_version


def dependency_status(package_name: str, version_spec: str) -> DependencyStatus:
    """Describe ``package_name`` as installed, missing or at the wrong version."""
    meets, installed = check_version_requirement(package_name, version_spec)
    if installed is None:
        status = NOT_INSTALLED
    elif meets:
        status = INSTALLED
    else:
        status = VERSION_MISMATCH
    return DependencyStatus(name=package_name, required=version_spec, installed=installed, status=status)


__all__ = [
    "DependencyStatus",
    "get_package_version",
    "check_version_requirement",
    "dependency_status",
    "INSTALLED",
    "NOT_INSTALLED",
    "VERSION_MISMATCH",
]
