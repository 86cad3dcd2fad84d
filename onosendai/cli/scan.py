"""
scan.py

CLI command to ask a blackice server for the hosts reachable with our identity.
"""
from typing import Optional

import requests
import typer
from rich.console import Console
from rich.markup import escape

from onosendai.cli.fingerprint import describe_fingerprint_error
from onosendai.client.scan import build_scan_url, scan_request
from onosendai.crypto.errors import FingerprintError
from onosendai.utils.config import get_scan_config
from onosendai.utils.logger import get_logger

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
logger = get_logger("cli-scan")

EXAMPLE_USAGE = "onosendai scan -s blackice.maaslabs.com -i ~/.ssh/icebreaker.pem"


def scan_command(
    ctx: typer.Context,
    server: Optional[str] = typer.Option(None, "--server", "-s", help="blackice server to connect to"),
    identity_file: Optional[str] = typer.Option(None, "--identity_file", "-i", help="your identity file"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds"),
):
    """
    Connect to a blackice server to retrieve a list of reachable hosts.
    """
    try:
        cfg = get_scan_config((ctx.obj or {}).get("config"))
    except ValueError as e:
        err_console.print(f"Usage error: {e}", markup=False, highlight=False)
        raise typer.Exit(code=2)
    server = server or cfg["server"]
    identity_file = identity_file or cfg["identity_file"]
    timeout = timeout if timeout is not None else cfg["timeout"]

    if not server or not identity_file:
        err_console.print(
            "Usage error: When using the scan command, you must specify a server and an identity file.\n"
        )
        err_console.print(f"Example usage: {EXAMPLE_USAGE}", markup=False, highlight=False)
        raise typer.Exit(code=2)

    console.print(f"Connecting to server <{server}>", markup=False, highlight=False)
    url = build_scan_url(server, cfg["endpoint"])
    try:
        body = scan_request(url, identity_file, timeout=timeout)
    except FingerprintError as e:
        err_console.print(f"[bold red]❌ ERROR:[/bold red] {escape(describe_fingerprint_error(identity_file, e))}")
        raise typer.Exit(code=1)
    except requests.RequestException as e:
        logger.error(f"Request to {url} failed: {e}")
        err_console.print(f"Error occurred: {e}", markup=False, highlight=False)
        raise typer.Exit(code=1)
    except OSError as e:
        err_console.print(f"[bold red]❌ ERROR:[/bold red] {escape(describe_fingerprint_error(identity_file, e))}")
        raise typer.Exit(code=1)

    typer.echo(body)
