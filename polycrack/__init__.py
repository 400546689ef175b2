"""
polycrack: Vigenère cipher and frequency-analysis attack
=========================================================
Classical polyalphabetic substitution, and the textbook attack
that breaks it from ciphertext alone.

Modules:
    languages   : alphabet profiles (English, Russian)
    text        : normalization to a profile's alphabet
    frequency   : letter frequencies, index of coincidence
    ciphers     : Caesar and Vigenère engines, key-length search
    keyrecovery : literal key from a plaintext/ciphertext pair
    config      : POLYCRACK_* settings for front ends

License: Apache 2.0
"""

__version__ = "1.0.0"

from .languages          import Language, ENGLISH, RUSSIAN, LANGUAGES, get_language
from .text               import normalize
from .frequency          import frequency_table, index_of_coincidence
from .keyrecovery        import Rot, recover_key, find_period
from .ciphers.caesar     import CaesarCipher
from .ciphers.vigenere   import VigenereCipher, Candidate
from .config             import Settings, get_settings

__all__ = [
    "Language",
    "ENGLISH",
    "RUSSIAN",
    "LANGUAGES",
    "get_language",
    "normalize",
    "frequency_table",
    "index_of_coincidence",
    "Rot",
    "recover_key",
    "find_period",
    "CaesarCipher",
    "VigenereCipher",
    "Candidate",
    "Settings",
    "get_settings",
]
