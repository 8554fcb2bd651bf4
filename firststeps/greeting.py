"""Write greetings to a writer and serve them over HTTP."""

from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import TextIO


def greeting(writer: TextIO, name: str) -> None:
    """Write a greeting for ``name`` to ``writer``."""
    writer.write(f"Hello, {name}")


class GreetingHandler(BaseHTTPRequestHandler):
    """Answers every GET request with a greeting."""

    def do_GET(self) -> None:
        body = b"Hello, word"
        self.send_response(200)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def main(argv: list[str] | None = None) -> int:
    """Serve greetings on port 5001."""
    try:
        with HTTPServer(("", 5001), GreetingHandler) as httpd:
            httpd.serve_forever()
    except OSError as err:
        print(err)
        return 1
    return 0