"""
fingerprint.py

CLI command to print the fingerprint of a private key file.
"""
import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from onosendai.crypto.decoder import decode
from onosendai.crypto.errors import (
    EncodeError,
    FingerprintError,
    MalformedKeyEncoding,
    NoPEMBlockFound,
    UnsupportedKeyType,
)
from onosendai.crypto.fingerprint import fingerprint

err_console = Console(stderr=True, soft_wrap=True)


def describe_fingerprint_error(path, error: Exception) -> str:
    """Turn a fingerprint failure into an actionable one-line message."""
    if isinstance(error, (NoPEMBlockFound, UnsupportedKeyType)):
        return f"'{path}' is not a supported private key: {error}"
    if isinstance(error, MalformedKeyEncoding):
        return f"key file '{path}' could not be parsed: {error}"
    if isinstance(error, EncodeError):
        return f"key in '{path}' could not be canonicalized: {error}"
    if isinstance(error, OSError):
        return f"key file '{path}' could not be read: {error.strerror or error}"
    return f"{error}"


def fingerprint_command(
    identity_file: Path = typer.Argument(..., help="Path to a PEM private key (RSA or EC)."),
    json_output: bool = typer.Option(False, "--json", help="Output the result in JSON format"),
):
    """
    Print the SHA-1 fingerprint of a private key's canonical PKCS#8 encoding.
    """
    try:
        material = decode(identity_file.expanduser().read_bytes())
        value = fingerprint(material)
    except (FingerprintError, OSError) as e:
        err_console.print(f"[bold red]❌ ERROR:[/bold red] {escape(describe_fingerprint_error(identity_file, e))}")
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(json.dumps({
            "path": str(identity_file),
            "key_type": material.key_type,
            "fingerprint": value,
        }, indent=2))
        return

    typer.echo(value)
