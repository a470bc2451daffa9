"""Testing fakes – in-memory doubles for the client's ports."""
from modrinth_client.testing.fakes.transport import FakeTransport, RecordedCall

__all__ = ["FakeTransport", "RecordedCall"]
