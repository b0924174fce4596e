# service.py  ── single-route Flask service

import logging
import os

from flask import Flask
from werkzeug.exceptions import MethodNotAllowed, NotFound
from werkzeug.serving import make_server as _make_server

GREETING = "Hello from Express on Bun!"
CONTENT_TYPE = "text/html; charset=utf-8"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
LOG_FORMAT = '[%(levelname)s] %(message)s'

log = logging.getLogger(__name__)


def get_port():
    """Port from $PORT. A bad value raises ValueError and aborts startup."""
    raw = os.getenv('PORT', str(DEFAULT_PORT))
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"PORT out of range: {port}")
    return port


def get_host():
    return os.getenv('HOST', DEFAULT_HOST)


def create_app():
    app = Flask(__name__)

    @app.get('/')
    def home():
        return GREETING, 200, {'Content-Type': CONTENT_TYPE}

    # only GET / is routed, so a method miss is a routing miss
    @app.errorhandler(MethodNotAllowed)
    def handle_405(e):
        return NotFound().get_response()

    @app.errorhandler(500)
    def handle_500(e):
        app.logger.exception('Server Error')
        return "<h3>Internal server error.</h3>", 500

    return app


app = create_app()


def make_server(host, port, wsgi_app=None):
    """Bind the listening socket. Port in use → SystemExit(1), not retried."""
    if wsgi_app is None:
        wsgi_app = app
    return _make_server(host, port, wsgi_app, threaded=True)


def main():
    logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO').upper(), format=LOG_FORMAT)
    port = get_port()
    server = make_server(get_host(), port)
    log.info(f"Server listening on http://localhost:{server.server_port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        log.info("Shutting down")
    finally:
        server.server_close()
