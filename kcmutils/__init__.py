"""Helpers for cluster management controllers: registry types, release names, labels, owner references and status conditions."""

__version__ = "0.1.0"
__all__ = ["helm", "release", "labels", "kube", "status"]