# Codec configs
MARKER: str = "A"       # the only symbol allowed in a unary string
BYTE_BASE: int = 256    # digit base of the bijective numeral system

# Unary allocation ceilings (max string length we are willing to build)
CEILING_32BIT: int = 536_870_911
CEILING_64BIT: int = 2_305_843_009_213_693_951
DEFAULT_CEILING: int = 536_870_911    # used when no ceiling is given, about 512 MB of markers

# Round-trip verifier configs
VERIFY_SAMPLES: int = 2000          # random byte strings per run
VERIFY_MAX_LENGTH: int = 64         # longest random byte string
VERIFY_UNARY_MAX_LENGTH: int = 2    # unary check only up to this many bytes (3 bytes is ~16.8M chars)
VERIFY_SEED: int = 42

# Script output suffixes
LENGTH_SUFFIX: str = ".b1len"   # decimal Base1 length
UNARY_SUFFIX: str = ".b1"       # unary string
DECODED_SUFFIX: str = ".out"    # decoded bytes
