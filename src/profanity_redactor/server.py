"""HTTP sidecar server for profanity-redactor.

Runs as a lightweight stdlib HTTP server on localhost so other services
can share one loaded dictionary instead of spawning a process per check.

Endpoints:
    POST /detect             {"text": ...}                → {"profane": bool}
    POST /sanitize           {"text": ..., "replace_with"?} → {"text": ..., "matches": [...]}
    POST /matches            {"text": ...}                → {"matches": [...]}
    POST /sanitize-messages  {"messages": [...]}          → {"messages": [...]}
    GET  /health             — Health check

Every POST body may also carry "word_boundaries" to override the default.
"""

from __future__ import annotations
import json
import logging
import os
from http.server import HTTPServer, BaseHTTPRequestHandler
from typing import Any

from .config import _as_bool, create_filter, load_from_yaml
from .filter import Filter

logger = logging.getLogger(__name__)

DEFAULT_PORT = int(os.environ.get("PROFANITY_REDACTOR_PORT", "18792"))
DEFAULT_CONFIG = os.environ.get("PROFANITY_REDACTOR_CONFIG", "")

# Shared state
_filter: Filter | None = None


def _get_filter() -> Filter:
    global _filter
    if _filter is None:
        _filter = create_filter(load_from_yaml(DEFAULT_CONFIG) if DEFAULT_CONFIG else None)
    return _filter


def _matches_json(matches: list) -> list[dict[str, Any]]:
    return [{"word": m.word, "start": m.start, "end": m.end} for m in matches]


class FilterHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the filter sidecar."""

    def _read_json(self) -> dict[str, Any]:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        return json.loads(body) if body else {}

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._respond(200, {"status": "ok", "words": _get_filter().words.size})
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        try:
            body = self._read_json()
            f = _get_filter()
            text = body.get("text", "")
            boundaries = body.get("word_boundaries")
            if boundaries is not None:
                boundaries = _as_bool(boundaries)

            if self.path == "/detect":
                self._respond(200, {"profane": f.detect(text, boundaries)})

            elif self.path == "/sanitize":
                result = f.redact(text, body.get("replace_with"), boundaries)
                self._respond(200, {
                    "text": result.text,
                    "matches": _matches_json(result.matches),
                })

            elif self.path == "/matches":
                self._respond(200, {"matches": _matches_json(f.get_matches(text, boundaries))})

            elif self.path == "/sanitize-messages":
                messages = body.get("messages", [])
                self._respond(200, {
                    "messages": f.sanitize_messages(messages, word_boundaries=boundaries),
                })

            else:
                self._respond(404, {"error": "not found"})

        except Exception as e:
            logger.exception("request to %s failed", self.path)
            self._respond(500, {"error": str(e)})


def make_server(port: int = DEFAULT_PORT, filter_: Filter | None = None) -> HTTPServer:
    """Bind the sidecar on localhost, optionally with a pre-built filter."""
    global _filter
    if filter_ is not None:
        _filter = filter_
    return HTTPServer(("127.0.0.1", port), FilterHandler)


def serve(port: int = DEFAULT_PORT) -> None:
    """Start the profanity-redactor HTTP sidecar."""
    server = make_server(port)
    words = _get_filter().words.size
    logger.info("profanity-redactor sidecar listening on http://127.0.0.1:%d", server.server_port)
    logger.info("  config: %s, dictionary: %d words", DEFAULT_CONFIG or "(defaults)", words)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("shutting down")
        server.shutdown()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="profanity-redactor HTTP sidecar")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    serve(port=args.port)
