import logging
import sys
from argparse import ArgumentParser
from os import path

from base1.codec.unary import decode_from_unary
from base1.shared.config import DECODED_SUFFIX
from base1.shared.errors import Base1Error
from base1.wrappers.text import decode_length_text

def main() -> None:
    parser = ArgumentParser(description="Decode a Base1 length or Base1 string back into a file")
    parser.add_argument("input", help="File holding a decimal Base1 length (or a Base1 string with --unary)")
    parser.add_argument("-o", "--output", help="Output file")
    parser.add_argument("--unary", action="store_true", help="Input is a repeated-marker string")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log codec details")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    with open(args.input, "rb") as input_file:
        raw: bytes = input_file.read()

    try:
        # Base1 strings and lengths are plain ASCII
        text: str = raw.decode("ascii")
        if args.unary:
            decoded: bytes = decode_from_unary(text)
        else:
            decoded = decode_length_text(text.strip())
    except (Base1Error, UnicodeDecodeError) as e:
        print(f"Could not decode {args.input}: {e}")
        sys.exit(1)

    output_path: str = args.output or path.splitext(args.input)[0] + DECODED_SUFFIX
    with open(output_path, "wb") as output_file:
        output_file.write(decoded)

    print(f"Decoded {len(text)} characters to {len(decoded)} bytes -> {output_path}")

if __name__ == "__main__":
    main()
