"""
Convert an image to a Windows .ico file.

Usage: icopack IMAGE-FILE [OUTPUT-FILE] [--multi]

  IMAGE-FILE   input image (BMP, JPEG, PNG or GIF)
  OUTPUT-FILE  output icon; defaults to the input path with extension .ico

With --multi the icon holds 16x16 up to 256x256 versions of the image,
otherwise a single image at the input's own size (at most 256x256).
Exits with status 2 on any error.
"""

import argparse
import sys
from pathlib import Path

from .encoder import ICON_SIZES, IcoEncoder
from .errors import IcoError


def default_output_path(input_path: str) -> str:
    return str(Path(input_path).with_suffix('.ico'))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="icopack",
        description="Convert an image (BMP, JPEG, PNG or GIF) to a Windows .ico file",
    )
    parser.add_argument("input", metavar="IMAGE-FILE", help="Input image")
    parser.add_argument(
        "output", metavar="OUTPUT-FILE", nargs="?",
        help="Output icon (default: input path with extension .ico)"
    )
    parser.add_argument(
        "--multi", action="store_true",
        help=f"Embed all standard sizes ({', '.join(str(s) for s in ICON_SIZES)})"
    )
    return parser


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)
    output = args.output or default_output_path(args.input)

    encoder = IcoEncoder()
    print(f"Source: {args.input}")
    try:
        icon = encoder.from_file(args.input, multi=args.multi)
    except IcoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        Path(output).write_bytes(icon)
    except OSError as e:
        print(f"Error: cannot write output file '{output}': {e}", file=sys.stderr)
        return 2

    print(f"Created: {output} ({len(icon):,} bytes)")
    if args.multi:
        print(f"  {len(encoder.sizes)} sizes embedded: {', '.join(f'{s}x{s}' for s in encoder.sizes)}")
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
