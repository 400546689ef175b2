"""
polycrack: Live Demo: encrypt, crack, recover the key
======================================================
Run:  python examples/demo_crack.py [KEY]

Encrypts a passage with a Vigenère key, forgets the key, cracks the
ciphertext by frequency analysis and reports the recovered key.
Language, key-length budget and rotation come from POLYCRACK_*
environment variables (see polycrack/config.py).
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from polycrack.config           import get_settings
from polycrack.ciphers.vigenere import VigenereCipher

LINE = "═" * 70
KEYS = {"english": "LEMON", "russian": "КЛЮЧ"}

SAMPLES = {
    "english": (
        "It was the best of times, it was the worst of times, it was the age of "
        "wisdom, it was the age of foolishness, it was the epoch of belief, it was "
        "the epoch of incredulity, it was the season of Light, it was the season of "
        "Darkness, it was the spring of hope, it was the winter of despair, we had "
        "everything before us, we had nothing before us, we were all going direct "
        "to Heaven, we were all going direct the other way. In short, the period "
        "was so far like the present period, that some of its noisiest authorities "
        "insisted on its being received, for good or for evil, in the superlative "
        "degree of comparison only."
    ),
    "russian": (
        "Все счастливые семьи похожи друг на друга, каждая несчастливая семья "
        "несчастлива по-своему. Все смешалось в доме Облонских. Жена узнала, что "
        "муж был в связи с бывшею в их доме француженкою-гувернанткой, и объявила "
        "мужу, что не может жить с ним в одном доме. Положение это продолжалось уже "
        "третий день и мучительно чувствовалось и самими супругами, и всеми членами "
        "семьи, и домочадцами. Все члены семьи и домочадцы чувствовали, что нет "
        "смысла в их сожительстве и что на каждом постоялом дворе случайно "
        "сошедшиеся люди более связаны между собой, чем они."
    ),
}


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL, format=" %(message)s")

    cipher = VigenereCipher.from_settings(settings)
    sample = SAMPLES.get(settings.LANGUAGE, SAMPLES["english"])
    key    = sys.argv[1] if len(sys.argv) > 1 else KEYS.get(settings.LANGUAGE, "LEMON")

    print(f"\n{LINE}")
    print(f"  polycrack: Vigenère attack | {cipher.language.name}")
    print(LINE)

    ciphertext = cipher.encrypt(sample, key)
    ok("Key",        key)
    ok("Encrypted",  ciphertext[:40] + "...")

    t0      = time.perf_counter()
    ranked  = cipher.crack(ciphertext, settings.MAX_KEY_LENGTH)
    elapsed = time.perf_counter() - t0
    if not ranked:
        print("  No candidates (MAX_KEY_LENGTH must be at least 2).")
        sys.exit(1)

    best = ranked[0]
    ok("Search",     f"{len(ranked)} key lengths in {elapsed*1000:.1f} ms")
    for c in ranked[:3]:
        print(f"       L={c.key_length:<3} score={c.score:.5f}  {c.plaintext[:32]}...")
    ok("Decrypted",  best.plaintext[:40] + "...")
    ok("Code",       cipher.recover_key(best.plaintext, ciphertext))
    print(LINE + "\n")
