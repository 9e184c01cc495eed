def split_into_words(text: str) -> list[str]:
    """Splits text on spaces, skipping the empty tokens left by repeated spaces."""
    return [word for word in text.split(" ") if word]


def is_valid_word(word: str) -> bool:
    """A word is valid if it contains no control characters (code points below 0x20)."""
    return not any(ord(char) < 0x20 for char in word)


def is_valid_minus_word(word: str) -> bool:
    """
    Checks the raw query token for malformed negation.

    Rejects an empty token, a bare ``-`` and anything starting with ``--``.
    """
    return bool(word) and word != "-" and not word.startswith("--")
