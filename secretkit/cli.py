"""CLI for secretkit: generate, pronounceable, custom, number, otp, apikey, strength, encrypt/decrypt."""

import argparse
import logging
from getpass import getpass
from typing import List, Optional

from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import load_config, options_from_config
from .encryption import SecretCipher
from .errors import ConfigError, DecryptionError
from .generator import (
    generate_multiple,
    generate_with_custom_pool,
    generate_random_number,
    generate_otp,
    generate_api_key,
    generate_pronounceable_password,
)
from .log import setup_logging
from .strength import check_password_strength

_OPTION_ARGS = (
    "length", "numbers", "lowercase", "uppercase",
    "exclude_similar_characters", "exclude", "strict",
)

def _passphrase(args, confirm: bool = False) -> str:
    if args.passphrase:
        return args.passphrase
    pw = getpass("Passphrase: ")
    if confirm and getpass("Confirm passphrase: ") != pw:
        raise ConfigError("Passphrase mismatch, aborting.")
    return pw

def cmd_generate(args, cfg):
    overrides = {k: getattr(args, k) for k in _OPTION_ARGS if getattr(args, k) is not None}
    if args.symbols_set:
        overrides["symbols"] = args.symbols_set
    elif args.symbols is not None:
        overrides["symbols"] = args.symbols
    results = generate_multiple(args.count, options_from_config(cfg), **overrides)
    for i, s in enumerate(results):
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(s)}")

def cmd_pronounceable(args, cfg):
    length = args.length if args.length is not None else cfg["pronounceable_length"]
    for i in range(args.count):
        print(f"[bold green]Password #{i+1}:[/bold green] {generate_pronounceable_password(length)}")

def cmd_custom(args, cfg):
    for i in range(args.count):
        s = generate_with_custom_pool(args.length, args.pool)
        print(f"[bold green]Secret #{i+1}:[/bold green] {escape(s)}")

def cmd_number(args, cfg):
    print(f"[bold green]Number:[/bold green] {generate_random_number(args.min, args.max, args.length)}")

def cmd_otp(args, cfg):
    length = args.length if args.length is not None else cfg["otp_length"]
    print(f"[bold green]OTP:[/bold green] {generate_otp(length)}")

def cmd_apikey(args, cfg):
    byte_length = args.bytes if args.bytes is not None else cfg["api_key_bytes"]
    print(f"[bold green]API key:[/bold green] {generate_api_key(byte_length)}")

def cmd_strength(args, cfg):
    result = check_password_strength(args.password)
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Criterion")
    table.add_column("Met")
    for name, met in result["criteria"].items():
        table.add_row(name, "[green]yes[/green]" if met else "[red]no[/red]")
    print(Panel(table, title=f"Strength: {result['label']} ({result['score']}/5)"))

def cmd_encrypt(args, cfg):
    cipher = SecretCipher.from_passphrase(_passphrase(args, confirm=not args.passphrase))
    out = cipher.encrypt(args.secret)
    print(f"[bold]ciphertext:[/bold] {out['ciphertext']}")
    print(f"[bold]iv:[/bold] {out['iv']}")
    print(f"[bold]salt:[/bold] {cipher.salt.hex()}")
    print("[yellow]Keep the salt and the IV; both are needed to decrypt.[/yellow]")

def cmd_decrypt(args, cfg):
    try:
        salt = bytes.fromhex(args.salt)
    except ValueError as e:
        raise DecryptionError("salt must be a hex string") from e
    cipher = SecretCipher.from_passphrase(_passphrase(args), salt=salt)
    print(f"[bold green]Secret:[/bold green] {escape(cipher.decrypt(args.ciphertext, args.iv))}")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="secretkit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=str, help="Path to config file")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, help="Password length")
    gen.add_argument("--numbers", action=argparse.BooleanOptionalAction, help="Include digits")
    gen.add_argument("--symbols", action=argparse.BooleanOptionalAction, help="Include default symbols")
    gen.add_argument("--symbols-set", type=str, help="Use this string as the symbol alphabet")
    gen.add_argument("--lowercase", action=argparse.BooleanOptionalAction, help="Include lowercase")
    gen.add_argument("--uppercase", action=argparse.BooleanOptionalAction, help="Include uppercase")
    gen.add_argument("--exclude-similar", dest="exclude_similar_characters",
                     action=argparse.BooleanOptionalAction, help="Drop i l L I | o O 0")
    gen.add_argument("--exclude", type=str, help="Characters to leave out")
    gen.add_argument("--strict", action=argparse.BooleanOptionalAction,
                     help="Patch in at least one character per enabled class")
    gen.add_argument("--count", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    pr = sub.add_parser("pronounceable", help="Generate pronounceable passwords")
    pr.add_argument("--length", type=int, help="Password length")
    pr.add_argument("--count", type=int, default=1)
    pr.set_defaults(func=cmd_pronounceable)

    cu = sub.add_parser("custom", help="Generate from a custom character pool")
    cu.add_argument("pool", type=str, help="Characters to draw from")
    cu.add_argument("--length", type=int, default=10)
    cu.add_argument("--count", type=int, default=1)
    cu.set_defaults(func=cmd_custom)

    nu = sub.add_parser("number", help="Zero-padded random number")
    nu.add_argument("--min", type=int, default=0)
    nu.add_argument("--max", type=int, default=1000)
    nu.add_argument("--length", type=int, default=4)
    nu.set_defaults(func=cmd_number)

    ot = sub.add_parser("otp", help="Numeric one-time password")
    ot.add_argument("--length", type=int, help="Number of digits")
    ot.set_defaults(func=cmd_otp)

    ak = sub.add_parser("apikey", help="Hex API key")
    ak.add_argument("--bytes", type=int, help="Number of random bytes")
    ak.set_defaults(func=cmd_apikey)

    st = sub.add_parser("strength", help="Check password strength")
    st.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    st.set_defaults(func=cmd_strength)

    en = sub.add_parser("encrypt", help="Encrypt a secret with a passphrase-derived key")
    en.add_argument("secret", type=str)
    en.add_argument("--passphrase", type=str, help="Passphrase (avoid passing via CLI in public shells)")
    en.set_defaults(func=cmd_encrypt)

    de = sub.add_parser("decrypt", help="Decrypt a secret produced by 'encrypt'")
    de.add_argument("ciphertext", type=str)
    de.add_argument("--iv", type=str, required=True)
    de.add_argument("--salt", type=str, required=True)
    de.add_argument("--passphrase", type=str, help="Passphrase (avoid passing via CLI in public shells)")
    de.set_defaults(func=cmd_decrypt)

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    setup_logging(logging.DEBUG if args.verbose else cfg.get("log_level", "WARNING"))
    try:
        args.func(args, cfg)
    except (ConfigError, DecryptionError) as e:
        print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
