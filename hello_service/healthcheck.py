"""
Liveness probe: GET / against a running instance, healthy only on HTTP 200.

    python -m hello_service.healthcheck [URL]
"""

import argparse
import logging
import os
import sys

import requests

from .service import DEFAULT_PORT, LOG_FORMAT

log = logging.getLogger(__name__)


def default_url():
    return f"http://localhost:{os.getenv('PORT', DEFAULT_PORT)}/"


def probe(url, timeout=3.0):
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        log.warning(f"health check failed: {url} -> {e}")
        return False
    if response.status_code != 200:
        log.warning(f"health check failed: {url} -> HTTP {response.status_code}")
        return False
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(prog="hello-service-healthcheck")
    parser.add_argument("url", nargs="?", default=None)
    parser.add_argument("--timeout", type=float, default=3.0)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    return 0 if probe(args.url or default_url(), timeout=args.timeout) else 1


if __name__ == '__main__':
    sys.exit(main())
