"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that asks interactively for whichever
parameters were left off the command line, including the subcommand itself. In non-interactive mode anything missing
is an error instead.

All numbers are given and printed in decimal. A value of the form `@path` is read from that file. Signatures are
printed as base64 text.

Typical usage example:

    pkutils rsa-encrypt --n 6012707 --e 3674911 --message 5234673
    OR
    python -m pkutils -n dsa-sign --p 124540019 --q 17389 --g 10083255 --x 12496 --message 42
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import sys
import typing

import pkutils
from pkutils import encoding
from pkutils import utils


def number(value: str) -> int:
    """Parses a decimal CLI value, following `@path` references."""
    if value.startswith("@"):
        value = pathlib.Path(value[1:]).read_text(encoding="ascii")
    return utils.bignum(value)


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Callable = number
    choices: list[str] | None = None
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in PK Utils.",
            choices=[
                "rsa-encrypt", "rsa-decrypt", "rsa-sign", "rsa-verify", "elgamal-encrypt", "elgamal-decrypt",
                "dsa-sign", "dsa-verify"
            ],
        ),
    "rsa-encrypt": HelpData("Textbook RSA encryption."),
    "rsa-decrypt": HelpData("Textbook RSA decryption."),
    "rsa-sign": HelpData("RSA signing of the message digest."),
    "rsa-verify": HelpData("RSA signature verification."),
    "elgamal-encrypt": HelpData("ElGamal encryption."),
    "elgamal-decrypt": HelpData("ElGamal decryption."),
    "dsa-sign": HelpData("DSA signing."),
    "dsa-verify": HelpData("DSA signature verification."),
    "n": HelpData("RSA public modulus."),
    "e": HelpData("RSA public exponent.", default=65537),
    "d": HelpData("RSA secret exponent."),
    "p": HelpData("Public prime."),
    "q": HelpData("DSA subgroup order."),
    "g": HelpData("Public group generator."),
    "y": HelpData("Public value g^x mod p."),
    "x": HelpData("Secret exponent."),
    "message": HelpData("Message integer."),
    "ciphertext":
        HelpData("Ciphertext integers, separated by spaces.", format=lambda v: [number(c) for c in v.split()]),
    "signature": HelpData("Base64 encoded signature.", format=str),
}

needs = {
    "rsa-encrypt": ("n", "e", "message"),
    "rsa-decrypt": ("n", "d", "ciphertext"),
    "rsa-sign": ("n", "d", "message"),
    "rsa-verify": ("n", "e", "message", "signature"),
    "elgamal-encrypt": ("p", "g", "y", "message"),
    "elgamal-decrypt": ("p", "x", "ciphertext"),
    "dsa-sign": ("p", "q", "g", "x", "message"),
    "dsa-verify": ("p", "q", "g", "y", "message", "signature"),
}

corep = argparse.ArgumentParser(prog="pkutils")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {pkutils.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")
for cmd, reqs in needs.items():
    sub = commands.add_parser(cmd, help=help_dict[cmd].description)
    for req in reqs:
        if req == "ciphertext":
            sub.add_argument("--ciphertext", "-c", type=number, nargs="+", help=help_dict[req].description)
        elif req == "signature":
            sub.add_argument("--signature", "-S", type=str, help=help_dict[req].description)
        elif req == "message":
            sub.add_argument("--message", "-m", type=number, help=help_dict[req].description)
        else:
            sub.add_argument(f"--{req}", type=number, help=help_dict[req].description)


def checkmodes(arg: str, non_interactive: bool):
    helper_data = help_dict[arg]
    if non_interactive and helper_data.default is not None:
        return helper_data.default
    if non_interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    vald = set(helper_data.choices)
    for choice in helper_data.choices:
        prntr(f"{choice} - {help_dict[choice].description}")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        prntr("Please select an option from the list.")


def input_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return helper_data.format(ch)
        except (ValueError, OSError):
            prntr("We could not read your value as a decimal number.")


def as_ciphertext(values: list[int], size: int) -> pkutils.Ciphertext:
    if len(values) != size:
        raise ValueError(f"Expected {size} ciphertext integer(s), got {len(values)}.")
    return pkutils.Single(*values) if size == 1 else pkutils.Pair(*values)


def main(argv: list[str] | None = None) -> None:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    quiet = args.non_interactive

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not quiet:
            print(text)

    pspr("Welcome to PK Utils!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", quiet)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            setattr(args, reqs, input_handler(reqs, quiet))
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    valid = True
    match args.subcommand:
        case "rsa-encrypt":
            c = pkutils.RSA(args.n, args.e, 0).encrypt(args.message)
            pspr("Ciphertext:")
            print(c.value)
        case "rsa-decrypt":
            m = pkutils.RSA(args.n, 0, args.d).decrypt(as_ciphertext(args.ciphertext, 1))
            pspr("Cleartext:")
            print(m)
        case "rsa-sign":
            sig = pkutils.RSA(args.n, 0, args.d).sign(args.message)
            pspr("Signature:")
            print(encoding.b64_enc(encoding.encode_rsa_signature(sig, args.n)))
        case "rsa-verify":
            sig = encoding.decode_rsa_signature(encoding.b64_dec(args.signature))
            valid = pkutils.RSA(args.n, args.e, 0).verify(args.message, sig)
        case "elgamal-encrypt":
            c = pkutils.ElGamal(args.p, args.g, args.y, 0).encrypt(args.message)
            pspr("Ciphertext:")
            print(c.c1, c.c2)
        case "elgamal-decrypt":
            m = pkutils.ElGamal(args.p, 0, 0, args.x).decrypt(as_ciphertext(args.ciphertext, 2))
            pspr("Cleartext:")
            print(m)
        case "dsa-sign":
            sig = pkutils.DSA(args.p, args.q, args.g, 0, args.x).sign(args.message)
            pspr("Signature:")
            print(encoding.b64_enc(encoding.encode_dss_signature(sig)))
        case "dsa-verify":
            sig = encoding.decode_dss_signature(encoding.b64_dec(args.signature))
            valid = pkutils.DSA(args.p, args.q, args.g, args.y, 0).verify(args.message, sig)
    if args.subcommand.endswith("-verify"):
        if not valid:
            print("Signature Verification Failed!")
            sys.exit(1)
        pspr("Signature Verified!")
    pspr("Thank you for using PK Utils!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
