"""Shared test utilities for ptreap."""

from .builders import node_snapshot, permuted_treap, permuted_values

__all__ = ["node_snapshot", "permuted_treap", "permuted_values"]
