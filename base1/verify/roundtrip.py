"""
Round-trip self check for the Base1 codec.
Encodes and decodes a batch of byte strings and reports every mismatch.
"""

from random import Random
from typing import Dict, List

from tqdm import tqdm

from base1.codec.decoder import decode_from_integer
from base1.codec.encoder import encode_to_integer
from base1.codec.unary import decode_from_unary, encode_to_unary
from base1.shared.config import VERIFY_MAX_LENGTH, VERIFY_SAMPLES, VERIFY_SEED, VERIFY_UNARY_MAX_LENGTH

# Always checked, these sit on block boundaries
BOUNDARY_SAMPLES: List[bytes] = [b"", b"\x00", b"\xff", b"\x00\x00", b"\xff\xff", b"\x00\x00\x00"]

def random_samples(count: int = VERIFY_SAMPLES, max_length: int = VERIFY_MAX_LENGTH, seed: int = VERIFY_SEED) -> List[bytes]:
    """
    Build a deterministic list of byte strings.
    - Starts with the boundary samples, then adds count random strings of 0..max_length bytes.
    """
    rng = Random(seed)
    samples: List[bytes] = list(BOUNDARY_SAMPLES)
    for _ in range(count):
        length = rng.randint(0, max_length)
        samples.append(bytes(rng.getrandbits(8) for _ in range(length)))
    return samples

def run_roundtrip_check(samples: List[bytes], unary_max_length: int = VERIFY_UNARY_MAX_LENGTH) -> Dict:
    """
    Check each sample through every codec path.
    - bytes -> int -> bytes
    - int -> bytes -> int
    - bytes -> unary -> bytes (only for samples up to unary_max_length bytes)
    - distinct samples never share a Base1 length
    Returns {"checked": number of samples, "failures": [{"sample", "check", ...}]}.
    """
    failures: List[Dict] = []
    seen: Dict[int, bytes] = {}

    with tqdm(total=len(samples), desc="Verifying round trips", unit="sample") as progress:
        for sample in samples:
            length = encode_to_integer(sample)

            # Bytes survive a trip through the integer
            decoded = decode_from_integer(length)
            if decoded != sample:
                failures.append({"sample": sample, "check": "bytes->int->bytes", "got": decoded})

            # The integer survives a trip through the bytes
            reencoded = encode_to_integer(decoded)
            if reencoded != length:
                failures.append({"sample": sample, "check": "int->bytes->int", "got": reencoded})

            # Bytes survive a trip through the unary string (small inputs only)
            if len(sample) <= unary_max_length:
                unary_decoded = decode_from_unary(encode_to_unary(sample))
                if unary_decoded != sample:
                    failures.append({"sample": sample, "check": "bytes->unary->bytes", "got": unary_decoded})

            # No two different samples may share a length
            previous = seen.setdefault(length, sample)
            if previous != sample:
                failures.append({"sample": sample, "check": "collision", "got": previous})

            progress.update(1)

    return {"checked": len(samples), "failures": failures}
