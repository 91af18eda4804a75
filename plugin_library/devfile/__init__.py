"""Devfile access and plugin reconciliation."""

from .reconciler import DevfileReconciler
from .reconciler import list_desired_plugins
from .reconciler import reconcile_components
from .store import YamlDevfileStore

__all__ = [
    "DevfileReconciler",
    "list_desired_plugins",
    "reconcile_components",
    "YamlDevfileStore",
]
