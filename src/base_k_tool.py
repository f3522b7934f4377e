#!/usr/bin/env python
"""
Command line front end for BaseK.

Supported commands:

1. encode

    base_k_tool.py encode -d base58 -i data.bin -o data.txt

2. decode

    base_k_tool.py decode -d base58 -i data.txt -o data.bin

Input and output default to stdin and stdout. The digit set can be one of the names in
digit_sets.named_digit_sets or a literal digit string, e.g. `-d 0123456789abcdef`.

Decoding with the default size can give one extra leading zero byte. Pass the original
length with `-n` to get the exact bytes back.
"""

import argparse

from base_k import BaseK, ConstructionError, ConversionError
from common_funcs import (
    read_input_bytes,
    std_stream_name,
    write_output_bytes,
    xprint,
)
from digit_sets import make_codec, named_digit_sets


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def codec_from_args(args: argparse.Namespace) -> BaseK:
    try:
        return make_codec(args.digits, args.case_insensitive)
    except ConstructionError:
        xprint(f"Unusable digit set '{args.digits}'")
        raise


def handle_encode(args: argparse.Namespace) -> None:
    codec = codec_from_args(args)
    data = read_input_bytes(args.input)
    try:
        text = codec.encode(data, args.out_size)
    except ConversionError:
        xprint(f"Error while encoding {len(data)} bytes from '{args.input}'")
        raise
    if args.output == std_stream_name:
        text += "\n"
    write_output_bytes(text.encode("ascii"), args.output)
    xprint(f"Encoded {len(data)} bytes => {len(text.rstrip())} base-{codec.radix} digits")


def handle_decode(args: argparse.Namespace) -> None:
    codec = codec_from_args(args)
    text = read_input_bytes(args.input).decode("ascii", errors="replace").strip()
    try:
        data = codec.decode(text, args.out_size)
    except ConversionError:
        xprint(f"Error while decoding {len(text)} digits from '{args.input}'")
        raise
    write_output_bytes(data, args.output)
    xprint(f"Decoded {len(text)} base-{codec.radix} digits => {len(data)} bytes")


def add_common_options(subparser: argparse.ArgumentParser) -> None:
    opt = subparser.add_argument
    opt(
        "-d",
        "--digits",
        required=True,
        help=f"digit set name ({', '.join(named_digit_sets)}) or literal digits",
    )
    opt("-i", "--input", default=std_stream_name, help="input file (default: stdin)")
    opt("-o", "--output", default=std_stream_name, help="output file (default: stdout)")
    opt(
        "-n",
        "--out_size",
        type=non_negative_int,
        default=None,
        help="number of output digits/bytes",
    )
    opt(
        "--case_insensitive",
        action="store_true",
        help="accept both upper and lower case digits when decoding",
    )


def get_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.set_defaults(func=lambda x: parser.print_help())
    subparsers = parser.add_subparsers()

    subparser = subparsers.add_parser("encode", help="encode bytes to base-k text")
    subparser.set_defaults(func=handle_encode)
    add_common_options(subparser)

    subparser = subparsers.add_parser("decode", help="decode base-k text to bytes")
    subparser.set_defaults(func=handle_decode)
    add_common_options(subparser)

    args = parser.parse_args(argv)
    return args


def main(argv: list[str] | None = None) -> None:
    args = get_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
