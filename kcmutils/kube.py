"""Generic helpers for Kubernetes objects held as mappings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, MutableMapping, Protocol

__all__ = [
    "DEFAULT_SYSTEM_NAMESPACE",
    "SERVICE_ACCOUNT_NAMESPACE_PATH",
    "GroupVersionKind",
    "NotFoundError",
    "DeletionPendingError",
    "ensure_delete_all_of",
    "current_namespace",
    "add_owner_reference",
]

DEFAULT_SYSTEM_NAMESPACE = "kcm-system"
SERVICE_ACCOUNT_NAMESPACE_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"


@dataclass(frozen=True)
class GroupVersionKind:
    """Identifies a kind of object in the API."""

    group: str
    version: str
    kind: str

    def api_version(self) -> str:
        """Return the ``apiVersion`` string for this group and version."""
        return f"{self.group}/{self.version}" if self.group else self.version


class NotFoundError(Exception):
    """Raised by a client when the requested object does not exist."""


class DeletionPendingError(Exception):
    """Objects still exist: deletion is in progress or failed."""

    def __init__(self, errors: Iterable[Exception]):
        self.errors = list(errors)
        super().__init__("\n".join(str(e) for e in self.errors))


class _Client(Protocol):
    def list(self, gvk: GroupVersionKind, list_options: Any) -> Iterable[Mapping[str, Any]]: ...

    def delete(self, obj: Mapping[str, Any]) -> None: ...


def ensure_delete_all_of(client: _Client, gvk: GroupVersionKind, list_options: Any = None) -> None:
    """Request deletion of every object of a kind and report those still present.

    Returns normally only when no objects are listed; otherwise raises
    DeletionPendingError naming each object still waiting for removal and
    each deletion that failed.
    """
    items = client.list(gvk, list_options)
    errors: list[Exception] = []
    for item in items:
        metadata = item.get("metadata") or {}
        if not metadata.get("deletionTimestamp"):
            try:
                client.delete(item)
            except NotFoundError:
                pass
            except Exception as exc:  # noqa: BLE001 - collected and reported
                errors.append(exc)
                continue
        namespace = metadata.get("namespace", "")
        name = metadata.get("name", "")
        errors.append(RuntimeError(f"waiting for {gvk.kind} {namespace}/{name} removal"))
    if errors:
        raise DeletionPendingError(errors)


def current_namespace(service_account_path: str | os.PathLike = SERVICE_ACCOUNT_NAMESPACE_PATH) -> str:
    """Return the namespace this process runs in.

    ``POD_NAMESPACE`` wins when set; then a non-empty service account
    namespace file; otherwise the default system namespace.
    """
    ns = os.environ.get("POD_NAMESPACE")
    if ns is not None:
        return ns
    try:
        content = Path(service_account_path).read_bytes()
    except OSError:
        content = b""
    if content:
        return content.decode()
    return DEFAULT_SYSTEM_NAMESPACE


def add_owner_reference(dependent: MutableMapping[str, Any], owner: Mapping[str, Any]) -> bool:
    """Append an owner reference to ``owner`` unless one with its UID exists.

    Returns True when the dependent was changed.
    """
    owner_meta = owner.get("metadata") or {}
    owner_uid = owner_meta.get("uid", "")
    metadata = dependent.setdefault("metadata", {})
    refs = list(metadata.get("ownerReferences") or [])
    if any(ref.get("uid") == owner_uid for ref in refs):
        return False
    refs.append(
        {
            "apiVersion": owner.get("apiVersion", ""),
            "kind": owner.get("kind", ""),
            "name": owner_meta.get("name", ""),
            "uid": owner_uid,
        }
    )
    metadata["ownerReferences"] = refs
    return True