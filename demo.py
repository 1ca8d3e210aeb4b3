#!/usr/bin/env python3
"""Issue the example requests against the demo app, first with the JSON
baseline access log, then with the pretty one"""

import logging
import os
import sys

from fastapi.testclient import TestClient

from api.main import create_app
from prettylog.formatters import LogStyle
from prettylog.formatting import MEGABYTE
from prettylog.settings import Settings

# (method, path) in the order they are sent
REQUESTS = [
    ("GET", "/"),
    ("GET", "/redirect"),
    ("GET", "/unauthorized"),
    ("CONNECT", "/not_found"),
    ("POST", "/post"),
]


def make_request(client: TestClient, method: str, path: str):
    """Send one request and read the whole body"""
    if method == "POST":
        # 1MB of random data as the request body
        response = client.post(path, content=os.urandom(MEGABYTE))
    elif method in ("GET", "CONNECT"):
        response = client.request(method, path)
    else:
        raise ValueError(f"unsupported method: {method}")
    response.read()
    return response


def run_requests(style: LogStyle):
    app = create_app(Settings(log_style=style, metrics_enabled=False))
    with TestClient(app) as client:
        for method, path in REQUESTS:
            make_request(client, method, path)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    log = logging.getLogger("demo")

    log.info("\n\n\nBefore:")
    run_requests(LogStyle.JSON)

    log.info("\n\n\nAfter:")
    run_requests(LogStyle.PRETTY)


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(f"ERROR: Demo failed: {e}")
        sys.exit(1)
