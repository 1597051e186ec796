"""SecureGen command-line interface.

Usage examples:
    python -m securegen generate -n 24 -c 5
    python -m securegen generate --no-symbols
    python -m securegen uuid -c 3
    python -m securegen check -f passwords.txt
"""

import argparse
import logging
import sys

from securegen import (
    CHARSETS,
    DEFAULT_LENGTH,
    MAX_SCORE,
    clamp_length,
    generate,
    generate_uuid,
    score_strength,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="securegen",
        description="Generate random passwords and UUIDs, and score password strength.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate random passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"Password length, 4-128 (default: {DEFAULT_LENGTH})",
    )
    for name in CHARSETS:
        gen_p.add_argument(f"--no-{name}", action="store_true")
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )

    # ── uuid ───────────────────────────────────────────────────────────
    uuid_p = sub.add_parser("uuid", help="Generate version-4 UUIDs")
    uuid_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of UUIDs to generate (default: 1)",
    )

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Score password strength")
    check_p.add_argument("passwords", nargs="*", help="Passwords to score")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "uuid":
        return _cmd_uuid(args)
    if args.command == "check":
        return _cmd_check(args)

    parser.print_help()
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    length = clamp_length(args.length)
    categories = [
        name for name in CHARSETS
        if not getattr(args, f"no_{name}")
    ]
    if not categories:
        print(
            "Warning: select at least one character type -- using uppercase",
            file=sys.stderr,
        )

    for _ in range(args.count):
        result = generate(length, categories)
        print(f"  {result['password']}  ({result['label']}, {result['score']}/{MAX_SCORE})")

    return 0


def _cmd_uuid(args: argparse.Namespace) -> int:
    for _ in range(args.count):
        print(f"  {generate_uuid()}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.strip() for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    for pwd in passwords:
        report = score_strength(pwd)
        bar = "#" * report["score"] + "-" * (MAX_SCORE - report["score"])
        print(f"  '{pwd}'  Strength: [{bar}] {report['label']}")
        for w in report["warnings"]:
            print(f"            ! {w}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
