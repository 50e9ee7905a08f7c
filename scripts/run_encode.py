import logging
import sys
from argparse import ArgumentParser

from base1.codec.unary import encode_to_unary
from base1.shared.config import LENGTH_SUFFIX, UNARY_SUFFIX
from base1.shared.errors import TooLarge
from base1.wrappers.text import encode_length_text

def main() -> None:
    parser = ArgumentParser(description="Encode a file as a Base1 length or Base1 string")
    parser.add_argument("input", help="File to encode")
    parser.add_argument("-o", "--output", help="Output file")
    parser.add_argument("--unary", action="store_true", help="Write the repeated-marker string instead of the decimal length")
    parser.add_argument("--ceiling", type=int, default=None, help="Longest unary string to build (default: platform limit)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log codec details")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    with open(args.input, "rb") as input_file:
        data: bytes = input_file.read()

    if args.unary:
        try:
            encoded: str = encode_to_unary(data, args.ceiling)
        except TooLarge as e:
            print(f"{e}\nRun again without --unary to write the decimal length.")
            sys.exit(1)
        output_path: str = args.output or args.input + UNARY_SUFFIX
    else:
        encoded = encode_length_text(data)
        output_path = args.output or args.input + LENGTH_SUFFIX

    with open(output_path, "w", encoding="ascii") as output_file:
        output_file.write(encoded)

    print(f"Encoded {len(data)} bytes to {len(encoded)} characters -> {output_path}")

if __name__ == "__main__":
    main()
