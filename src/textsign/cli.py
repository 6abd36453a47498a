"""
textsign CLI

Commands:
  textsign text sign     -i <input|-> -k <key> [--format blake3|ed25519]
  textsign text verify   -i <input|-> -k <key> --sig <base64> [--format ...]
  textsign text generate [--format ...] [-o <dir>]
  textsign base64 encode -i <input|-> [--format standard|urlsafe]
  textsign base64 decode -i <input|-> [--format standard|urlsafe]

Exit codes: 0 ok, 1 signature did not verify, 2 malformed key or signature,
3 input or key file could not be read or written.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from textsign import __version__
from textsign.config import default_format, default_key_dir
from textsign.const import AlgorithmTag, Base64Format
from textsign.errors import TextSignError
from textsign.process import process_text_generate, process_text_sign, process_text_verify
from textsign.source import get_reader
from textsign.transport import process_decode, process_encode

logger = logging.getLogger(__name__)

EXIT_NOT_VERIFIED = 1
EXIT_BAD_INPUT = 2
EXIT_IO_ERROR = 3


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _out(as_json: bool, ok: bool, data: Optional[dict] = None,
         error_code: int = 1, error_msg: str = "") -> None:
    if as_json:
        if ok:
            click.echo(json.dumps({"ok": True, "data": data or {}}, indent=2))
        else:
            click.echo(json.dumps({"ok": False, "error": {"code": error_code, "message": error_msg}}, indent=2))


def _fail(as_json: bool, msg: str, exit_code: int = 1) -> None:
    if as_json:
        _out(as_json, False, error_code=exit_code, error_msg=msg)
    else:
        click.secho(f"✗ {msg}", fg="red", err=True)
    sys.exit(exit_code)


def verify_input_file(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if value == "-":
        return value
    path = Path(value)
    if not path.exists():
        raise click.BadParameter("File does not exist")
    if not path.is_file():
        raise click.BadParameter("Not a regular file")
    return value


def _parse_format(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> AlgorithmTag:
    try:
        return AlgorithmTag.parse(default_format(value))
    except ValueError as e:
        raise click.BadParameter(str(e))


def _parse_b64_format(ctx: click.Context, param: click.Parameter, value: str) -> Base64Format:
    try:
        return Base64Format(value.lower())
    except ValueError:
        raise click.BadParameter(f"Unsupported format: {value}")


input_option = click.option(
    "-i", "--input", "input_", default="-", show_default=True,
    callback=verify_input_file, help="Input file, or - for stdin.",
)
format_option = click.option(
    "--format", "fmt", default=None, callback=_parse_format,
    help="blake3 or ed25519. Defaults to TEXTSIGN_FORMAT, then config, then blake3.",
)
json_option = click.option("--json", "as_json", is_flag=True)


# ---------------------------------------------------------------------------
# CLI root
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(__version__, prog_name="textsign")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
def cli(verbose: bool):
    """Sign and verify text with BLAKE3 or Ed25519."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# textsign text ...
# ---------------------------------------------------------------------------

@cli.group()
def text():
    """Text signing, verification and key generation."""


@text.command("sign")
@input_option
@click.option("-k", "--key", required=True, type=click.Path(exists=True, dir_okay=False))
@format_option
@json_option
def text_sign(input_: str, key: str, fmt: AlgorithmTag, as_json: bool):
    """Sign the input and print the URL-safe base64 signature."""
    try:
        signed = process_text_sign(input_, key, fmt)
    except TextSignError as e:
        _fail(as_json, str(e), exit_code=EXIT_BAD_INPUT)
        return
    except OSError as e:
        _fail(as_json, f"Cannot read input: {e}", exit_code=EXIT_IO_ERROR)
        return

    if as_json:
        _out(as_json, True, {"format": fmt.value, "signature": signed})
    else:
        click.echo(signed)


@text.command("verify")
@input_option
@click.option("-k", "--key", required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--sig", required=True, help="Signature, URL-safe base64 without padding.")
@format_option
@json_option
def text_verify(input_: str, key: str, sig: str, fmt: AlgorithmTag, as_json: bool):
    """Verify a signature over the input."""
    try:
        verified = process_text_verify(input_, key, fmt, sig)
    except TextSignError as e:
        _fail(as_json, str(e), exit_code=EXIT_BAD_INPUT)
        return
    except OSError as e:
        _fail(as_json, f"Cannot read input: {e}", exit_code=EXIT_IO_ERROR)
        return

    if as_json:
        _out(as_json, True, {"format": fmt.value, "verified": verified})
    elif verified:
        click.secho("✓ Signature verified.", fg="green")
    else:
        click.secho("✗ Signature does not match.", fg="red")

    if not verified:
        sys.exit(EXIT_NOT_VERIFIED)


@text.command("generate")
@format_option
@click.option("-o", "--output", default=None, envvar="TEXTSIGN_KEY_DIR",
              help="Output directory for the key files.")
@json_option
def text_generate(fmt: AlgorithmTag, output: Optional[str], as_json: bool):
    """Generate new key material and write it to the output directory."""
    outdir = Path(default_key_dir(output))
    try:
        written = process_text_generate(fmt, outdir)
    except OSError as e:
        _fail(as_json, f"Cannot write keys to {outdir}: {e}", exit_code=EXIT_IO_ERROR)
        return

    if as_json:
        _out(as_json, True, {"format": fmt.value, "files": {k: str(v) for k, v in written.items()}})
    else:
        for path in written.values():
            click.echo(f"wrote {path}")


# ---------------------------------------------------------------------------
# textsign base64 ...
# ---------------------------------------------------------------------------

@cli.group("base64")
def base64_group():
    """Base64 encode and decode."""


b64_format_option = click.option(
    "--format", "fmt", default="standard", show_default=True,
    callback=_parse_b64_format, help="standard or urlsafe (unpadded).",
)


@base64_group.command("encode")
@input_option
@b64_format_option
def b64_encode(input_: str, fmt: Base64Format):
    try:
        reader = get_reader(input_)
        try:
            encoded = process_encode(reader, fmt)
        finally:
            if input_ != "-":
                reader.close()
    except OSError as e:
        _fail(False, f"Cannot read input: {e}", exit_code=EXIT_IO_ERROR)
        return
    click.echo(encoded)


@base64_group.command("decode")
@input_option
@b64_format_option
def b64_decode(input_: str, fmt: Base64Format):
    try:
        reader = get_reader(input_)
        try:
            decoded = process_decode(reader, fmt)
        finally:
            if input_ != "-":
                reader.close()
    except OSError as e:
        _fail(False, f"Cannot read input: {e}", exit_code=EXIT_IO_ERROR)
        return
    except ValueError as e:
        _fail(False, f"Invalid base64 input: {e}", exit_code=EXIT_BAD_INPUT)
        return
    click.echo(decoded)


if __name__ == "__main__":
    cli()
