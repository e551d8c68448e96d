"""Corpus persistence adapters."""

from distill.boundary.state.json_state_store import JsonStateStore

__all__ = ["JsonStateStore"]
