"""HTTP front end serving the weapons as JSON."""

from __future__ import annotations

import json
import logging
import signal
import threading
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable, Protocol
from urllib.parse import urlsplit

from .config import Config
from .types import Weapon

_log = logging.getLogger(__name__)

Response = tuple[HTTPStatus, Any]


class Servicer(Protocol):
    def insert_weapons(self) -> None: ...

    def get_weapons(self) -> list[Weapon]: ...


def _split_address(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep:
        host, port = "", addr
    return host, int(port or 0)


class Server:
    """Routes requests to the service and runs the HTTP listener."""

    def __init__(self, service: Servicer) -> None:
        self.service = service
        self._routes: dict[str, dict[str, Callable[[], Response]]] = {
            "/weapons": {
                "GET": self.handle_get_weapons,
                "POST": self.handle_insert_weapons,
            },
        }
        self._httpd: ThreadingHTTPServer | None = None
        self._ready = threading.Event()
        self._stop = threading.Event()

    def handle_insert_weapons(self) -> Response:
        try:
            self.service.insert_weapons()
        except Exception as exc:
            _log.error("insert weapons failed: %s", exc)
            return HTTPStatus.BAD_REQUEST, {"error": str(exc)}
        return HTTPStatus.OK, None

    def handle_get_weapons(self) -> Response:
        try:
            weapons = self.service.get_weapons()
        except Exception as exc:
            _log.error("get weapons failed: %s", exc)
            return HTTPStatus.BAD_REQUEST, {"error": str(exc)}
        return HTTPStatus.OK, {"weapons": [weapon.to_dict() for weapon in weapons]}

    def dispatch(self, method: str, path: str) -> Response:
        """Return the status and JSON payload for a request."""
        methods = self._routes.get(urlsplit(path).path)
        if methods is None:
            return HTTPStatus.NOT_FOUND, {"error": "not found"}
        handler = methods.get(method.upper())
        if handler is None:
            return HTTPStatus.METHOD_NOT_ALLOWED, {"error": "method not allowed"}
        return handler()

    @property
    def address(self) -> tuple[str, int]:
        """The address the running listener is bound to."""
        if self._httpd is None:
            raise RuntimeError("server is not running")
        host, port = self._httpd.server_address[:2]
        return str(host), int(port)

    def wait_until_ready(self, timeout: float | None = None) -> bool:
        """Block until :meth:`run` is accepting connections."""
        return self._ready.wait(timeout)

    def shutdown(self) -> None:
        """Ask a running :meth:`run` to stop."""
        self._stop.set()

    def _handler_class(self, timeout: float | None) -> type[BaseHTTPRequestHandler]:
        server = self

        class _Handler(BaseHTTPRequestHandler):
            def _respond(self) -> None:
                status, payload = server.dispatch(self.command, self.path)
                body = json.dumps(payload, ensure_ascii=False).encode("utf-8") + b"\n"
                self.send_response(status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                if self.command != "HEAD":
                    self.wfile.write(body)

            do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = do_HEAD = _respond

            def log_message(self, format: str, *args: Any) -> None:
                _log.debug(format, *args)

        _Handler.timeout = timeout
        return _Handler

    def _install_signal_handlers(self) -> Callable[[], None]:
        if threading.current_thread() is not threading.main_thread():
            return lambda: None
        previous = {
            sig: signal.signal(sig, lambda signum, frame: self._stop.set())
            for sig in (signal.SIGINT, signal.SIGTERM)
        }

        def restore() -> None:
            for sig, handler in previous.items():
                signal.signal(sig, handler)

        return restore

    def run(self, config: Config) -> None:
        """Serve until interrupted or :meth:`shutdown` is called."""
        settings = config.server
        read_timeout = settings.read_timeout.total_seconds() or None
        httpd = ThreadingHTTPServer(_split_address(settings.port), self._handler_class(read_timeout))
        self._httpd = httpd
        self._stop.clear()
        restore = self._install_signal_handlers()
        thread = threading.Thread(target=httpd.serve_forever, daemon=True)
        thread.start()
        _log.info("server starting on [http://localhost:%s]", settings.port)
        self._ready.set()
        try:
            self._stop.wait()
        finally:
            httpd.shutdown()
            httpd.server_close()
            thread.join(10)
            restore()
            self._ready.clear()
            self._httpd = None
        _log.info("server shutdown")