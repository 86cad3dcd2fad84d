from typing import Optional

import typer

from onosendai import __version__
from onosendai.cli.fingerprint import fingerprint_command
from onosendai.cli.scan import scan_command
from onosendai.utils.config import get_log_level
from onosendai.utils.logger import set_log_level

app = typer.Typer(help="onosendai CLI — identify yourself to a blackice server with your private key.")


def _version_callback(value: bool):
    if value:
        typer.echo(f"onosendai {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", "-c", envvar="ONOSENDAI_CONFIG", help="Path to a YAML config file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output, including the outgoing request."),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
):
    """Set up logging before any command runs."""
    try:
        level = get_log_level(config)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    set_log_level("DEBUG" if verbose else level)
    ctx.obj = {"config": config}


app.command("scan")(scan_command)
app.command("fingerprint")(fingerprint_command)


def main():
    app()


if __name__ == "__main__":
    main()

"""
Command-Line Interface (CLI) Usage

scan
Connects to a blackice server and retrieves the list of hosts reachable
with your identity.

What it does:
- Reads your identity file (PEM private key, RSA or EC)
- Computes its fingerprint (SHA-1 of the canonical PKCS#8 encoding)
- POSTs it as the `identity` form field to <server>/scan
- Prints the server's answer

Example:
onosendai scan -s blackice.maaslabs.com -i ~/.ssh/icebreaker.pem

fingerprint
Prints the fingerprint the scan command would send.

Example:
onosendai fingerprint ~/.ssh/icebreaker.pem
onosendai fingerprint ~/.ssh/icebreaker.pem --json

Settings can also come from a YAML file (--config, $ONOSENDAI_CONFIG or
./onosendai.yaml) and from ONOSENDAI_* environment variables:

scan:
  server: blackice.maaslabs.com
  identity_file: ~/.ssh/icebreaker.pem
  timeout: 10
logging:
  level: INFO
"""
