from base1.shared.errors import Base1Error
from base1.wrappers.text import decode_length_text, encode_length_text


def main() -> None:
    print("Type text to encode, '#<length>' to decode a Base1 length, or '+exit' to quit.\n")

    while True:
        entry: str = input("Enter text: ").strip()
        if entry.lower() in {"+exit"}:
            print("\nExiting Base1 console.")
            break

        try:
            if entry.startswith("#"):
                decoded: bytes = decode_length_text(entry[1:].strip())
                print(f"\nDecoded: {decoded.decode('utf-8', errors='replace')!r} ({len(decoded)} bytes)\n")
            else:
                length: str = encode_length_text(entry.encode("utf-8"))
                print(f"\nBase1 length: {length}\n")

        except Base1Error as e:
            print(f"\nAn error occurred: {e}\n")


if __name__ == "__main__":
    main()
