"""Greeting writer and a small HTTP server that greets."""

import io
import sys
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import TextIO


def greet(writer: TextIO, name: str) -> None:
    """Write a greeting for name to writer."""
    writer.write("Hello, " + name)


class GreeterHandler(BaseHTTPRequestHandler):
    """Answer every request with a greeting for Matt."""

    def do_GET(self) -> None:
        buffer = io.StringIO()
        greet(buffer, "Matt")
        body = buffer.getvalue().encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    do_POST = do_PUT = do_DELETE = do_GET


def main(argv: list[str] | None = None) -> int:
    """Serve greetings on port 5001."""
    try:
        with HTTPServer(("", 5001), GreeterHandler) as server:
            server.serve_forever()
    except OSError as exc:
        sys.exit(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())