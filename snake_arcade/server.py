"""Static file server for the browser client."""

from __future__ import annotations

import logging
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

logger = logging.getLogger(__name__)


class StaticHandler(SimpleHTTPRequestHandler):
    """Serves files from ``static_dir``; ``/`` maps to ``index.html``."""

    static_dir: Path

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, directory=str(self.static_dir), **kwargs)

    def _rewrite_root(self) -> None:
        if self.path == "/" or self.path.startswith("/?"):
            self.path = "/index.html"

    def do_GET(self) -> None:
        self._rewrite_root()
        super().do_GET()

    def do_HEAD(self) -> None:
        self._rewrite_root()
        super().do_HEAD()

    def log_message(self, format: str, *args) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)


def create_handler_class(*, static_dir: Path) -> type[StaticHandler]:
    """Create a handler class with the static directory bound."""

    class BoundHandler(StaticHandler):
        pass

    BoundHandler.static_dir = static_dir
    return BoundHandler


def create_server(*, static_dir: Path, host: str = "127.0.0.1", port: int = 3456) -> ThreadingHTTPServer:
    if not (static_dir / "index.html").is_file():
        raise FileNotFoundError(f"index.html not found in {static_dir}")
    handler_class = create_handler_class(static_dir=static_dir)
    return ThreadingHTTPServer((host, port), handler_class)


def run_server(*, static_dir: Path, host: str = "127.0.0.1", port: int = 3456) -> None:
    server = create_server(static_dir=static_dir, host=host, port=port)
    bound_port = server.server_address[1]
    logger.info("serving %s on %s:%d", static_dir, host, bound_port)
    print(f"Snake game server running at http://localhost:{bound_port}")
    print("Press Ctrl+C to stop the server")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nShutting down server...")
    finally:
        server.server_close()
