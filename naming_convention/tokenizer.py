"""Logic for splitting text into case-homogeneous word tokens."""

import re

ACRONYM_RE = re.compile(r"[A-Z]{2,}")
CAPITALIZED_RE = re.compile(r"[A-Z][a-z]*")
LOWERCASE_RE = re.compile(r"[a-z]+")
DIGITS_RE = re.compile(r"[0-9]+")


class Tokenizer:
    """Splits identifiers and free text into words, numbers and acronyms."""

    def __init__(self, *, digits: bool = False) -> None:
        """Initialize the tokenizer, optionally emitting digit runs as tokens."""
        self.digits = digits
        self.patterns: tuple[re.Pattern[str], ...] = (
            ACRONYM_RE,
            CAPITALIZED_RE,
            LOWERCASE_RE,
        )
        if digits:
            self.patterns += (DIGITS_RE,)

    def tokenize(self, text: str) -> list[str]:
        """Split a string into a list of tokens.

        Algorithm Precedence:
        1. Acronym runs (A-Z length >= 2), greedy. An acronym directly followed
           by a TitleCase word swallows its capital: HTMLParser -> HTMLP, arser.
        2. TitleCase words (one capital, then lowercase).
        3. Lowercase runs.
        4. Digit runs, only when digit support is enabled.

        Every other character separates tokens and is dropped.
        """
        tokens = []
        i = 0
        n = len(text)
        while i < n:
            for pattern in self.patterns:
                match = pattern.match(text, i)
                if match:
                    tokens.append(match.group(0))
                    i = match.end()
                    break
            else:
                # Separator
                i += 1
        return tokens


def tokenize(text: str, *, digits: bool = False) -> list[str]:
    """Split a string into tokens with a one-off Tokenizer."""
    return Tokenizer(digits=digits).tokenize(text)
