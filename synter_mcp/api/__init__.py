"""Synter API gateway."""

from .client import RemoteRequest, SynterAPIClient

__all__ = ["RemoteRequest", "SynterAPIClient"]
