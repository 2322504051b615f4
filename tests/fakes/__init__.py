# Fake implementations for testing

from .fake_shared_client import FakeOperation, FakeSharedClient

__all__ = ["FakeOperation", "FakeSharedClient"]
