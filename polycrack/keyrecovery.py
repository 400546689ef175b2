"""
Key recovery
============
Given a plaintext and its Vigenère ciphertext, rebuild the literal
repeating key.

The per-position difference ciphertext - plaintext (the "delta")
is the key stream itself. A short key repeated over a long text
shows up as a periodic delta, so the shortest period is reported.
"""

import logging
from enum import IntEnum
from typing import List, Optional

from .languages import Language
from .text import letter, normalize, offset

logger = logging.getLogger(__name__)


class Rot(IntEnum):
    """Rotation applied to every recovered key letter (ROT1: key 'A' shifts by one)."""
    ROT0 = 0
    ROT1 = 1


def _chunks(text: str, size: int) -> List[str]:
    return [text[i:i + size] for i in range(0, len(text), size)]


def find_period(delta: str, strict: bool = False) -> str:
    """
    Shortest prefix of `delta` that repeats across it.

    Only chunks of full length are compared against the first one; a
    shorter trailing chunk is accepted as is. With `strict`, the trailing
    chunk must also be a prefix of the period.
    The whole string is always its own period, so only "" maps to "".
    """
    for size in range(1, len(delta) + 1):
        chunks = _chunks(delta, size)
        head = chunks[0]
        if not all(c == head for c in chunks if len(c) == size):
            continue
        if strict and not head.startswith(chunks[-1]):
            continue
        return head
    return ""


def recover_key(plaintext: str, ciphertext: str, language: Language,
                rot: int = Rot.ROT0, strict: bool = False) -> Optional[str]:
    """
    Recover the repeating key that turned `plaintext` into `ciphertext`.

    Returns None when the two texts normalize to different lengths
    (they cannot be a plaintext/ciphertext pair).
    """
    plaintext = normalize(plaintext, language)
    ciphertext = normalize(ciphertext, language)

    if len(plaintext) != len(ciphertext):
        logger.debug(f"Length mismatch: plaintext={len(plaintext)} ciphertext={len(ciphertext)}")
        return None

    delta = "".join(
        letter(offset(c, language) - offset(p, language) - rot, language)
        for p, c in zip(plaintext, ciphertext)
    )
    key = find_period(delta, strict=strict)
    logger.debug(f"Recovered key of length {len(key)} from delta of length {len(delta)}")
    return key
