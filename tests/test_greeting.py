import io

from firststeps.greeting import GreetingHandler, greeting


class _FakeConnection:
    """A socket stand-in that replays a request and records the reply."""

    def __init__(self, raw: bytes) -> None:
        self._raw = raw
        self.sent = bytearray()

    def makefile(self, mode, *args, **kwargs):
        return io.BytesIO(self._raw)

    def sendall(self, data) -> None:
        self.sent.extend(data)


def test_greeting():
    buffer = io.StringIO()
    greeting(buffer, "Ariadne")
    assert buffer.getvalue() == "Hello, Ariadne"


def test_handler_serves_greeting():
    connection = _FakeConnection(b"GET / HTTP/1.0\r\nHost: localhost\r\n\r\n")
    GreetingHandler(connection, ("127.0.0.1", 0), None)

    reply = bytes(connection.sent)
    head, _, body = reply.partition(b"\r\n\r\n")
    status_line = head.split(b"\r\n", 1)[0]

    assert status_line.split()[1] == b"200"
    assert body == b"Hello, word"