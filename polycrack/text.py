"""Alphabet-aware text normalization and offset helpers."""

from .languages import Language


def normalize(text: str, language: Language) -> str:
    """
    Uppercase `text` and keep only letters of `language`'s alphabet.
    Everything else (spaces, digits, punctuation, foreign letters) is dropped.
    Characters are uppercased one at a time; one that uppercases to several
    ("ß" -> "SS") is dropped rather than expanded.
    """
    lo = language.start_code
    hi = lo + language.alphabet_size
    out = []
    for ch in text:
        up = ch.upper()
        if len(up) == 1 and lo <= ord(up) < hi:
            out.append(up)
    return "".join(out)


def offset(ch: str, language: Language) -> int:
    return ord(ch) - language.start_code


def letter(value: int, language: Language) -> str:
    return chr(language.start_code + value % language.alphabet_size)
