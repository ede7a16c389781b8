"""Naming of releases and their template charts."""

from __future__ import annotations

__all__ = ["release_name_from_version", "templates_chart_from_release_name"]


def release_name_from_version(version: str) -> str:
    """Build a release name such as ``kcm-0-0-1`` from a version like ``v0.0.1``."""
    return "kcm-" + version.removeprefix("v").replace(".", "-")


def templates_chart_from_release_name(release_name: str) -> str:
    """Return the name of the templates chart belonging to a release."""
    return release_name + "-tpl"