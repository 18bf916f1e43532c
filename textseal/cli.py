#!/usr/bin/env python3
"""
Command line interface for textseal.

Usage:
    textseal text sign -k KEY [-i INPUT] [-f blake3|ed25519]
    textseal text verify -k KEY -s SIGNATURE [-i INPUT] [-f blake3|ed25519]
    textseal text generate [-f blake3|ed25519|chacha20] [-o DIR]
    textseal text encrypt -k KEY [-i INPUT]
    textseal text decrypt -k KEY [-i INPUT]
    textseal genpass [-l LENGTH] [--no-uppercase] [--no-lowercase] [--no-number] [--no-symbol]
    textseal base64 encode|decode [-i INPUT] [--format standard|urlsafe]
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import ConfigError, TextSealConfig
from .crypto.errors import NonUtf8Plaintext, TextSealError, UnsupportedOperation
from .crypto.keys import AlgorithmTag
from .process.b64 import process_decode, process_encode
from .process.text import (
    process_text_decrypt,
    process_text_encrypt,
    process_text_key_generate,
    process_text_sign,
    process_text_verify,
    write_generated_keys,
)
from .utils.codec import Base64Format
from .utils.genpass import generate_password
from .utils.source import STDIN_MARKER


logger = logging.getLogger(__name__)


def verify_file(filename: str) -> str:
    """Accept "-" or the path of an existing file."""
    if filename == STDIN_MARKER or os.path.isfile(filename):
        return filename
    raise argparse.ArgumentTypeError(f"File does not exist: {filename}")


def verify_path(path: str) -> str:
    """Accept the path of an existing directory."""
    if os.path.isdir(path):
        return path
    raise argparse.ArgumentTypeError(f"Path does not exist or is not a directory: {path}")


def parse_format(value: str) -> AlgorithmTag:
    try:
        return AlgorithmTag.parse(value)
    except UnsupportedOperation as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_base64_format(value: str) -> Base64Format:
    try:
        return Base64Format.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog='textseal',
                                     description='Text signing, encryption and key tools')
    parser.add_argument('--config-dir', type=str,
                        help='Configuration directory (default: $TEXTSEAL_HOME or ~/.textseal)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Sub-commands')

    # text
    text_parser = subparsers.add_parser('text', help='Text sign/verify/encrypt/decrypt')
    text_sub = text_parser.add_subparsers(dest='text_command', help='Text operations')

    sign_parser = text_sub.add_parser('sign', help='Sign a message with a private/shared key')
    sign_parser.add_argument('-i', '--input', type=verify_file, default=STDIN_MARKER,
                             help='Input file, or - for stdin (default: -)')
    sign_parser.add_argument('-k', '--key', type=verify_file, required=True,
                             help='Key file')
    sign_parser.add_argument('-f', '--format', type=parse_format,
                             help='blake3 or ed25519 (default: from config)')

    verify_parser = text_sub.add_parser('verify',
                                        help='Verify a signed message with a public/shared key')
    verify_parser.add_argument('-i', '--input', type=verify_file, default=STDIN_MARKER,
                               help='Input file, or - for stdin (default: -)')
    verify_parser.add_argument('-k', '--key', type=verify_file, required=True,
                               help='Key file')
    verify_parser.add_argument('-f', '--format', type=parse_format,
                               help='blake3 or ed25519 (default: from config)')
    verify_parser.add_argument('-s', '--signature', type=str, required=True,
                               help='Signature as URL-safe base64')

    generate_parser = text_sub.add_parser('generate', help='Generate key material')
    generate_parser.add_argument('-f', '--format', type=parse_format,
                                 help='blake3, ed25519 or chacha20 (default: from config)')
    generate_parser.add_argument('-o', '--output', type=verify_path,
                                 help='Output directory (default: key_dir from config)')

    encrypt_parser = text_sub.add_parser('encrypt', help='Encrypt a message with ChaCha20-Poly1305')
    encrypt_parser.add_argument('-i', '--input', type=verify_file, default=STDIN_MARKER,
                                help='Input file, or - for stdin (default: -)')
    encrypt_parser.add_argument('-k', '--key', type=verify_file, required=True,
                                help='Key file')

    decrypt_parser = text_sub.add_parser('decrypt', help='Decrypt a message with ChaCha20-Poly1305')
    decrypt_parser.add_argument('-i', '--input', type=verify_file, default=STDIN_MARKER,
                                help='Input file, or - for stdin (default: -)')
    decrypt_parser.add_argument('-k', '--key', type=verify_file, required=True,
                                help='Key file')

    # genpass
    genpass_parser = subparsers.add_parser('genpass', help='Generate a random password')
    genpass_parser.add_argument('-l', '--length', type=int, default=16,
                                help='Password length (default: 16)')
    genpass_parser.add_argument('--no-uppercase', action='store_true',
                                help='Exclude upper-case letters')
    genpass_parser.add_argument('--no-lowercase', action='store_true',
                                help='Exclude lower-case letters')
    genpass_parser.add_argument('--no-number', action='store_true',
                                help='Exclude digits')
    genpass_parser.add_argument('--no-symbol', action='store_true',
                                help='Exclude symbols')

    # base64
    b64_parser = subparsers.add_parser('base64', help='Base64 encode/decode')
    b64_sub = b64_parser.add_subparsers(dest='base64_command', help='Base64 operations')
    for name, help_text in (('encode', 'Encode input to base64'),
                            ('decode', 'Decode base64 input')):
        p = b64_sub.add_parser(name, help=help_text)
        p.add_argument('-i', '--input', type=verify_file, default=STDIN_MARKER,
                       help='Input file, or - for stdin (default: -)')
        p.add_argument('--format', type=parse_base64_format, default=Base64Format.STANDARD,
                       help='standard or urlsafe (default: standard)')

    return parser


def run_text(args: argparse.Namespace, config: TextSealConfig) -> int:
    """Execute a text sub-command."""
    strict = config.strict_key_length
    fmt = getattr(args, 'format', None) or config.default_format

    if args.text_command == 'sign':
        print(process_text_sign(args.input, args.key, fmt, strict=strict))

    elif args.text_command == 'verify':
        verified = process_text_verify(args.input, args.key, fmt, args.signature,
                                       strict=strict)
        print(str(verified).lower())

    elif args.text_command == 'generate':
        output = args.output or config.key_dir
        if not os.path.isdir(output):
            raise ConfigError(f"Key directory does not exist: {output}")
        keys = process_text_key_generate(fmt)
        for path in write_generated_keys(keys, output):
            print(path)

    elif args.text_command == 'encrypt':
        print(process_text_encrypt(args.input, args.key, strict=strict))

    elif args.text_command == 'decrypt':
        print(process_text_decrypt(args.input, args.key, strict=strict))

    return 0


def run_base64(args: argparse.Namespace) -> int:
    """Execute a base64 sub-command."""
    if args.base64_command == 'encode':
        print(process_encode(args.input, args.format))
    else:
        decoded = process_decode(args.input, args.format)
        try:
            print(decoded.decode('utf-8'))
        except UnicodeDecodeError as e:
            raise NonUtf8Plaintext("Decoded data is not valid UTF-8") from e
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 2
    if args.command == 'text' and args.text_command is None:
        parser.error('text requires a sub-command')
    if (getattr(args, 'key', None) == STDIN_MARKER
            and getattr(args, 'input', None) == STDIN_MARKER):
        parser.error('key and input cannot both be read from stdin')
    if args.command == 'base64' and args.base64_command is None:
        parser.error('base64 requires a sub-command')

    try:
        config = TextSealConfig.load(args.config_dir)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        if args.command == 'text':
            return run_text(args, config)

        if args.command == 'genpass':
            print(generate_password(args.length,
                                    uppercase=not args.no_uppercase,
                                    lowercase=not args.no_lowercase,
                                    number=not args.no_number,
                                    symbol=not args.no_symbol))
            return 0

        if args.command == 'base64':
            return run_base64(args)

    except (TextSealError, ConfigError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
