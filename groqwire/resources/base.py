"""Common base for resource wrappers."""
from __future__ import annotations

from ..base.constants import API_PREFIX
from ..transport.client import BaseClient


class APIResource:
    """Thin wrapper holding the shared transport.

    Resources translate method arguments into paths and payloads and return
    whatever the transport returns. Errors are never translated here.
    """

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    @staticmethod
    def _path(*parts: str) -> str:
        return "/".join([API_PREFIX, *(p.strip("/") for p in parts)])


__all__ = ["APIResource"]
