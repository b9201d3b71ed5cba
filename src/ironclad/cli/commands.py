"""CLI – command handlers and the default registry."""
from __future__ import annotations

import argparse

from ironclad.application.masking import MaskConfig, RedactionRuleSet, mask, redact_file
from ironclad.cli.registry import Command, CommandContext, CommandRegistry, Option
from ironclad.security.hashing import generate_salt, hash_string, verify_hash
from ironclad.security.tokens import random_string

__all__ = ["build_registry"]


def _hash(args: argparse.Namespace, ctx: CommandContext) -> int:
    if not args.value:
        ctx.err("Error: Please provide a string to hash.")
        return 1
    algorithm = args.algorithm or ctx.settings.hash_algorithm
    digest = hash_string(
        args.value,
        algorithm=algorithm,
        encoding=args.encoding or ctx.settings.hash_encoding,
        salt=args.salt or None,
    )
    ctx.out(f"Hashed string ({algorithm}): {digest}")
    return 0


def _generate_salt(args: argparse.Namespace, ctx: CommandContext) -> int:
    length = args.length if args.length is not None else ctx.settings.salt_length
    ctx.out(f"Generated Salt: {generate_salt(length)}")
    return 0


def _compare(args: argparse.Namespace, ctx: CommandContext) -> int:
    if not args.value or not args.digest:
        ctx.err("Error: Please provide both the string and hash to compare.")
        return 1
    match = verify_hash(
        args.value,
        args.digest,
        algorithm=args.algorithm or ctx.settings.hash_algorithm,
        encoding=args.encoding or ctx.settings.hash_encoding,
        salt=args.salt or None,
    )
    ctx.out(f"Match: {str(match).lower()}")
    return 0


def _mask(args: argparse.Namespace, ctx: CommandContext) -> int:
    if not args.value:
        ctx.err("Error: Please provide a string to mask.")
        return 1
    config = MaskConfig(
        visible_start=args.visible_start,
        visible_end=args.visible_end,
        mask_char=args.mask_char,
        sensitivity=args.sensitivity,
    )
    ctx.out(f"Masked string: {mask(args.value, config)}")
    return 0


def _random(args: argparse.Namespace, ctx: CommandContext) -> int:
    length = args.length if args.length is not None else ctx.settings.random_length
    charset = args.charset or ctx.settings.random_charset
    ctx.out(f"Generated Random String: {random_string(length, charset)}")
    return 0


def _redact(args: argparse.Namespace, ctx: CommandContext) -> int:
    if not args.file or not (args.rules or args.rules_file):
        ctx.err("Error: Please provide both the file path (-f) and redaction rules (-r)")
        return 1
    encoding = args.encoding or ctx.settings.file_encoding
    if args.rules_file:
        rules = RedactionRuleSet.from_file(args.rules_file, encoding=encoding)
    else:
        rules = RedactionRuleSet.from_json(args.rules)

    result = redact_file(args.file, rules, args.output, encoding=encoding)
    for failure in result.failures:
        reason = failure.error.cause or failure.error.message
        ctx.err(f"Warning: rule '{failure.pattern}' skipped: {reason}")
    if result.in_place:
        ctx.out("File redacted successfully. Original file overwritten.")
    else:
        ctx.out(f"File redacted successfully. Redacted content saved to: {result.destination}")
    return 0


def _help(args: argparse.Namespace, ctx: CommandContext) -> int:  # noqa: ARG001
    ctx.out(ctx.registry.help_text())
    return 0


_ALGORITHM = Option(("-a", "--algorithm"), "Hashing algorithm (sha256, sha512, bcrypt)", "algorithm")
_SALT = Option(("-s", "--salt"), "Salt for hashing", "salt")
_ENCODING = Option(("-e", "--encoding"), "Digest encoding (hex, base64)", "encoding")


def build_registry() -> CommandRegistry:
    """Construct the registry of every ``ironclad`` command."""
    return CommandRegistry([
        Command(
            "hash",
            "Hash a string securely",
            _hash,
            (
                Option(("value",), "String to hash", kwargs={"nargs": "?"}),
                _ALGORITHM,
                _SALT,
                _ENCODING,
            ),
        ),
        Command(
            "generate-salt",
            "Generate a cryptographically secure random salt",
            _generate_salt,
            (
                Option(
                    ("-l", "--length"),
                    "Desired length of the salt (in bytes, default: 16)",
                    "length",
                    {"type": int},
                ),
            ),
        ),
        Command(
            "compare",
            "Compare a string to a hash securely",
            _compare,
            (
                Option(("value",), "Plaintext string", kwargs={"nargs": "?"}),
                Option(("digest",), "Hash to compare against", kwargs={"nargs": "?"}),
                _ALGORITHM,
                _SALT,
                _ENCODING,
            ),
        ),
        Command(
            "mask",
            "Mask a string securely",
            _mask,
            (
                Option(("value",), "String to mask", kwargs={"nargs": "?"}),
                Option(
                    ("-s", "--visible-start"),
                    "Number of visible characters from the start (default: 2)",
                    "start",
                    {"type": int, "default": 2},
                ),
                Option(
                    ("-e", "--visible-end"),
                    "Number of visible characters from the end (default: 2)",
                    "end",
                    {"type": int, "default": 2},
                ),
                Option(
                    ("-l", "--sensitivity"),
                    "Sensitivity level (low, medium, high, default: medium)",
                    "level",
                    {"default": "medium"},
                ),
                Option(
                    ("-m", "--mask-char"),
                    "Masking character (default: *)",
                    "char",
                    {"default": "*"},
                ),
            ),
        ),
        Command(
            "random",
            "Generate a random string",
            _random,
            (
                Option(
                    ("-l", "--length"),
                    "Desired length of the string (default: 16)",
                    "length",
                    {"type": int},
                ),
                Option(
                    ("-c", "--charset"),
                    "Character set (alphanumeric, numeric, hex, default: alphanumeric)",
                    "charset",
                ),
            ),
        ),
        Command(
            "redact",
            "Redact sensitive data from a file",
            _redact,
            (
                Option(("-f", "--file"), "Path to the file to redact (required)", "path"),
                Option(
                    ("-r", "--rules"),
                    'Redaction rules as JSON. Example: \'{"\\\\d{16}": {"visibleStart": 4, "visibleEnd": 4}}\'',
                    "rules",
                ),
                Option(("--rules-file",), "Path to a JSON file of redaction rules", "path"),
                Option(
                    ("-o", "--output"),
                    "Path to save the redacted file (default: overwrite original)",
                    "path",
                ),
                Option(("--encoding",), "File encoding (default: utf-8)", "encoding"),
            ),
        ),
        Command("help", "Show help information", _help),
    ])
