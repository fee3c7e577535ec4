"""
SecureVault CLI
================

Click-based command-line interface for SecureVault. Provides password
strength analysis plus hashing, encryption, signing, random generation,
Base64 and CIDR subcommands.

Usage::

    python -m vault analyze "MyP@ssw0rd!"
    python -m vault hash "hello" --algorithm SHA-512
    python -m vault encrypt "secret text" --password hunter2
    python -m vault decrypt "<base64 blob>" --password hunter2
    python -m vault sign "message"
    python -m vault generate password --length 24
    python -m vault base64 encode "hello"
    python -m vault cidr 192.168.1.0/24

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

import click

from shared.config import VaultConfig
from shared.console import VaultConsole

from vault import __version__
from vault.core.engine import VaultEngine
from vault.core.errors import VaultError
from vault.core.models import Analysis
from vault.output.console import VaultConsoleOutput
from vault.output.report import VaultReportGenerator
from vault.toolkit.hashing import SUPPORTED_ALGORITHMS


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="SecureVault")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a SecureVault configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format (html applies to 'analyze' only).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner and console logging.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """SecureVault -- password strength analysis and crypto utilities."""
    ctx.ensure_object(dict)

    vault_config = VaultConfig.load(config) if config else VaultConfig()
    if quiet:
        vault_config.global_settings.console_log = False

    console = VaultConsole()
    ctx.obj["config"] = vault_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = console
    ctx.obj["engine"] = VaultEngine(vault_config)
    ctx.obj["display"] = VaultConsoleOutput(console)
    ctx.obj["reporter"] = VaultReportGenerator()

    if not quiet and output == "console":
        console.banner(version=vault_config.global_settings.version)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _run(ctx: click.Context, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Call a toolkit operation, turning :class:`VaultError` into exit code 1."""
    try:
        return func(*args, **kwargs)
    except VaultError as exc:
        ctx.obj["console"].error(str(exc))
        ctx.exit(1)


def _emit(ctx: click.Context, payload: dict[str, Any], render: Callable[[], None]) -> None:
    """Print *payload* as JSON, or call *render* for console output."""
    if ctx.obj["output_format"] == "json":
        text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
        output_file = ctx.obj["output_file"]
        if output_file:
            path = Path(output_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
            ctx.obj["console"].success(f"JSON saved to: {output_file}")
        else:
            click.echo(text)
    else:
        render()


# ===================================================================== #
#  Password Analysis
# ===================================================================== #

@cli.command()
@click.argument("password")
@click.pass_context
def analyze(ctx: click.Context, password: str) -> None:
    """Analyse password strength, patterns and breach similarity."""
    engine: VaultEngine = ctx.obj["engine"]
    reporter: VaultReportGenerator = ctx.obj["reporter"]
    console: VaultConsole = ctx.obj["console"]
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]

    result = engine.analyze_password(password)

    if output_format == "console":
        ctx.obj["display"].display_analysis(Analysis(**result.metadata))
    elif output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_json(result),
                indent=2,
                ensure_ascii=False,
                default=str,
            ))
    else:
        if output_file:
            target = Path(output_file)
        else:
            output_dir = Path(ctx.obj["config"].global_settings.output_dir)
            target = output_dir / "vault_password_report.html"
        path = reporter.generate_html(result, target)
        console.success(f"HTML report saved to: {path}")


# ===================================================================== #
#  Hashing / Encryption / Signing
# ===================================================================== #

@cli.command("hash")
@click.argument("text")
@click.option(
    "--algorithm", "-a",
    type=click.Choice(list(SUPPORTED_ALGORITHMS), case_sensitive=False),
    default="SHA-256",
    show_default=True,
    help="Digest algorithm. MD5 is a legacy non-cryptographic fallback.",
)
@click.pass_context
def hash_cmd(ctx: click.Context, text: str, algorithm: str) -> None:
    """Compute the hex digest of TEXT."""
    digest = _run(ctx, ctx.obj["engine"].hash_text, text, algorithm)
    _emit(
        ctx,
        {"algorithm": algorithm.upper(), "digest": digest},
        lambda: ctx.obj["display"].display_value(f"{algorithm.upper()} Digest", digest),
    )


@cli.command()
@click.argument("text")
@click.option("--password", "-p", required=True, help="Encryption password.")
@click.pass_context
def encrypt(ctx: click.Context, text: str, password: str) -> None:
    """Encrypt TEXT with AES-256-GCM under a password-derived key."""
    blob = _run(ctx, ctx.obj["engine"].encrypt_text, text, password)
    _emit(
        ctx,
        {"ciphertext": blob},
        lambda: ctx.obj["display"].display_value("Ciphertext (Base64)", blob),
    )


@cli.command()
@click.argument("blob")
@click.option("--password", "-p", required=True, help="Decryption password.")
@click.pass_context
def decrypt(ctx: click.Context, blob: str, password: str) -> None:
    """Decrypt a Base64 BLOB produced by 'encrypt'."""
    plaintext = _run(ctx, ctx.obj["engine"].decrypt_text, blob, password)
    _emit(
        ctx,
        {"plaintext": plaintext},
        lambda: ctx.obj["display"].display_value("Plaintext", plaintext),
    )


@cli.command()
@click.argument("text")
@click.pass_context
def sign(ctx: click.Context, text: str) -> None:
    """Generate a session RSA key pair and sign TEXT with RSA-PSS.

    Keys are not stored; the public key is printed so the signature can
    be checked elsewhere.
    """
    engine: VaultEngine = ctx.obj["engine"]
    display: VaultConsoleOutput = ctx.obj["display"]

    with ctx.obj["console"].status("Generating RSA key pair..."):
        keys = _run(ctx, engine.generate_key_pair)
    signature = _run(ctx, engine.sign_text, text)
    verified = _run(ctx, engine.verify_signature, text, signature)

    def render() -> None:
        display.display_value("Public Key (SPKI, Base64)", keys.public_key)
        display.display_value("Signature (RSA-PSS, Base64)", signature)
        ctx.obj["console"].success("Signature verified" if verified else "Signature check failed")

    _emit(
        ctx,
        {"public_key": keys.public_key, "signature": signature, "verified": verified},
        render,
    )


# ===================================================================== #
#  Random Generation
# ===================================================================== #

@cli.group()
def generate() -> None:
    """Generate random passwords, hex strings, UUIDs and keys."""


@generate.command("password")
@click.option("--length", "-l", type=int, default=None, help="Password length.")
@click.option("--no-lowercase", is_flag=True, help="Exclude lowercase letters.")
@click.option("--no-uppercase", is_flag=True, help="Exclude uppercase letters.")
@click.option("--no-numbers", is_flag=True, help="Exclude digits.")
@click.option("--no-symbols", is_flag=True, help="Exclude symbols.")
@click.option(
    "--exclude-similar/--include-similar",
    default=None,
    help="Drop look-alike characters (0 O 1 l I).",
)
@click.pass_context
def generate_password(
    ctx: click.Context,
    length: Optional[int],
    no_lowercase: bool,
    no_uppercase: bool,
    no_numbers: bool,
    no_symbols: bool,
    exclude_similar: Optional[bool],
) -> None:
    """Generate a random password."""
    value = _run(
        ctx,
        ctx.obj["engine"].generate_password,
        length,
        lowercase=not no_lowercase,
        uppercase=not no_uppercase,
        numbers=not no_numbers,
        symbols=not no_symbols,
        exclude_similar=exclude_similar,
    )
    _emit(ctx, {"password": value}, lambda: ctx.obj["display"].display_value("Password", value))


@generate.command("hex")
@click.option("--bytes", "-b", "nbytes", type=int, default=None, help="Number of random bytes.")
@click.pass_context
def generate_hex(ctx: click.Context, nbytes: Optional[int]) -> None:
    """Generate a random hex string."""
    value = _run(ctx, ctx.obj["engine"].generate_hex, nbytes)
    _emit(ctx, {"hex": value}, lambda: ctx.obj["display"].display_value("Hex", value))


@generate.command("uuid")
@click.pass_context
def generate_uuid(ctx: click.Context) -> None:
    """Generate a random UUID (version 4)."""
    value = ctx.obj["engine"].generate_uuid()
    _emit(ctx, {"uuid": value}, lambda: ctx.obj["display"].display_value("UUID", value))


@generate.command("key")
@click.option("--length", "-l", type=int, default=None, help="Key length in characters.")
@click.pass_context
def generate_key(ctx: click.Context, length: Optional[int]) -> None:
    """Generate a random encryption key string."""
    value = _run(ctx, ctx.obj["engine"].generate_key, length)
    _emit(ctx, {"key": value}, lambda: ctx.obj["display"].display_value("Key", value))


# ===================================================================== #
#  Base64 / CIDR
# ===================================================================== #

@cli.group("base64")
def base64_group() -> None:
    """Encode or decode Base64 text."""


@base64_group.command("encode")
@click.argument("text")
@click.pass_context
def base64_encode(ctx: click.Context, text: str) -> None:
    """Encode UTF-8 TEXT as Base64."""
    value = _run(ctx, ctx.obj["engine"].encode_base64, text)
    _emit(ctx, {"base64": value}, lambda: ctx.obj["display"].display_value("Base64", value))


@base64_group.command("decode")
@click.argument("data")
@click.pass_context
def base64_decode(ctx: click.Context, data: str) -> None:
    """Decode Base64 DATA to UTF-8 text."""
    value = _run(ctx, ctx.obj["engine"].decode_base64, data)
    _emit(ctx, {"text": value}, lambda: ctx.obj["display"].display_value("Decoded", value))


@cli.command()
@click.argument("notation")
@click.pass_context
def cidr(ctx: click.Context, notation: str) -> None:
    """Calculate network information for IPv4 CIDR NOTATION."""
    info = _run(ctx, ctx.obj["engine"].calculate_cidr, notation)
    _emit(ctx, info.model_dump(), lambda: ctx.obj["display"].display_cidr(info))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the SecureVault CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
