"""Label helpers for Kubernetes objects held as mappings."""

from __future__ import annotations

from typing import Any, MutableMapping

__all__ = ["add_label"]


def add_label(obj: MutableMapping[str, Any], label_key: str, label_value: str) -> bool:
    """Set a label on an object unless it already holds that value.

    Returns True when the object's labels were changed.
    """
    metadata = obj.setdefault("metadata", {})
    labels = metadata.get("labels")
    if labels is not None and labels.get(label_key) == label_value:
        return False
    if labels is None:
        labels = {}
    labels[label_key] = label_value
    metadata["labels"] = labels
    return True