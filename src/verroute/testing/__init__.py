"""Test helpers for verroute applications."""

from verroute.testing.client import TestClient

__all__ = ["TestClient"]
