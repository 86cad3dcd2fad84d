"""
scan.py

Client side of the blackice scan exchange: send the identity fingerprint
to a server and return the list of reachable hosts it answers with.
"""
from urllib.parse import urlsplit

import requests

from onosendai.crypto.fingerprint import fingerprint_file
from onosendai.utils.config import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT
from onosendai.utils.logger import get_logger

logger = get_logger("scan")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_scan_url(server: str, endpoint: str = DEFAULT_ENDPOINT) -> str:
    """Join ``server`` and ``endpoint``, defaulting to https when no scheme is given."""
    server = server.strip()
    if "://" not in server:
        server = f"https://{server}"
    return server.rstrip("/") + "/" + endpoint.lstrip("/")


def build_scan_request(url: str, identity: str) -> requests.PreparedRequest:
    return requests.Request(
        "POST",
        url,
        data={"identity": identity},
        headers={"Content-Type": FORM_CONTENT_TYPE},
    ).prepare()


def format_request(request: requests.PreparedRequest) -> str:
    """Generate an ascii representation of a prepared request."""
    url = urlsplit(request.url)
    lines = [f"{request.method} {request.path_url} HTTP/1.1", f"Host: {url.netloc}"]
    for name, value in request.headers.items():
        lines.append(f"{name.lower()}: {value}")

    if request.method == "POST":
        body = request.body or ""
        if isinstance(body, bytes):
            body = body.decode("utf-8", "replace")
        lines.append("")
        lines.append(body)
    return "\n".join(lines)


def scan_request(url: str, identity_path: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Fingerprint the identity file and POST it to ``url``.

    Returns the raw response body. Fingerprint errors and
    requests.RequestException are propagated to the caller.
    """
    identity = fingerprint_file(identity_path)
    logger.info(f"Using identity {identity}")

    request = build_scan_request(url, identity)
    logger.debug(f"Sending request:\n{format_request(request)}")

    with requests.Session() as session:
        resp = session.send(request, timeout=timeout)

    if not resp.ok:
        logger.warning(f"Server answered {resp.status_code} for {url}")
    return resp.text
