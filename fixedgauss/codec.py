"""
Vector files in the canonical contract-call argument layout.

A single fixed-size array of static int256 values encodes as its elements
one after another, each a 32-byte big-endian two's complement word, with no
offset or length header. ``int256[3][N]`` is therefore 96 bytes per triple
and ``int256[N]`` 32 bytes per value.
"""
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple
from .fixed_point import check_int256

WORD = 32
Triple = Tuple[int, int, int]

def encode_words(values: Iterable[int]) -> bytes:
    return b"".join(check_int256(int(v)).to_bytes(WORD, "big", signed=True) for v in values)

def decode_words(data: bytes) -> List[int]:
    if len(data) % WORD != 0:
        raise ValueError(f"Data length {len(data)} is not a multiple of {WORD}.")
    return [int.from_bytes(data[i:i + WORD], "big", signed=True) for i in range(0, len(data), WORD)]

def _check_count(found: int, n: Optional[int]) -> None:
    if n is not None and found != n:
        raise ValueError(f"Expected {n} elements, found {found}.")

def encode_triples(triples: Sequence[Triple]) -> bytes:
    for tr in triples:
        if len(tr) != 3:
            raise ValueError(f"Expected (x, mu, sigma), got {tr!r}.")
    return encode_words(v for tr in triples for v in tr)

def decode_triples(data: bytes, n: Optional[int] = None) -> List[Triple]:
    if len(data) % (3*WORD) != 0:
        raise ValueError(f"Data length {len(data)} is not a multiple of {3*WORD}.")
    words = decode_words(data)
    triples = [(words[i], words[i + 1], words[i + 2]) for i in range(0, len(words), 3)]
    _check_count(len(triples), n)
    return triples

def encode_outputs(values: Sequence[int]) -> bytes:
    return encode_words(values)

def decode_outputs(data: bytes, n: Optional[int] = None) -> List[int]:
    values = decode_words(data)
    _check_count(len(values), n)
    return values
