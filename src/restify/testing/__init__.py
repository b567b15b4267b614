"""Test utilities for restify applications.

    from restify.testing import TestClient
"""

from restify.testing.client import TestClient, TestResponse

__all__ = [
    "TestClient",
    "TestResponse",
]
