"""Generative collaborator adapters."""

from distill.boundary.llm.generator import GenerativeClient

__all__ = ["GenerativeClient"]
