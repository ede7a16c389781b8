"""Helm chart registry helpers."""

from __future__ import annotations

from enum import Enum
from urllib.parse import urlsplit

__all__ = ["RegistryType", "determine_default_repository_type"]


class RegistryType(str, Enum):
    """Kind of Helm repository behind a registry URL."""

    OCI = "oci"
    DEFAULT = "default"

    def __str__(self) -> str:
        return self.value


def determine_default_repository_type(default_registry_url: str) -> RegistryType:
    """Return the repository type that matches the scheme of a registry URL.

    Raises ValueError when the URL cannot be parsed or has an unsupported scheme.
    """
    try:
        scheme = urlsplit(default_registry_url).scheme
    except ValueError as exc:
        raise ValueError(f"failed to parse default registry URL: {exc}") from exc

    if scheme == "oci":
        return RegistryType.OCI
    if scheme in ("http", "https"):
        return RegistryType.DEFAULT
    raise ValueError(
        f"invalid default registry URL scheme: {scheme} must be "
        "'oci://', 'http://', or 'https://'"
    )