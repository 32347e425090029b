"""Logic for guessing which naming convention a whole string follows."""

import re

from naming_convention.naming_convention import NamingConvention


def _build_patterns(
    *, digits: bool
) -> tuple[tuple[NamingConvention, re.Pattern[str]], ...]:
    """Compile the acceptance rules, in the order they are tried."""
    num = "0-9" if digits else ""
    upper = f"[A-Z{num}]"
    lower = f"[a-z{num}]"
    return (
        (
            NamingConvention.PASCAL_CASE,
            re.compile(rf"{upper}{lower}*(?:{upper}{lower}*)*"),
        ),
        (
            NamingConvention.CAMEL_CASE,
            re.compile(rf"{lower}+(?:[A-Z]{lower}*)*"),
        ),
        (NamingConvention.SNAKE_CASE, re.compile(rf"{lower}+(?:_{lower}+)*")),
        (NamingConvention.KEBAB_CASE, re.compile(rf"{lower}+(?:-{lower}+)*")),
        (NamingConvention.UPPER_SNAKE_CASE, re.compile(rf"{upper}+(?:_{upper}+)*")),
    )


class ConventionClassifier:
    """Classifies identifiers into exactly one NamingConvention."""

    def __init__(self, *, digits: bool = False) -> None:
        """Initialize the classifier, optionally accepting digits inside words."""
        self.digits = digits
        self.patterns = _build_patterns(digits=digits)

    def guess(self, text: str) -> NamingConvention:
        """Return the first convention whose rule matches the entire string.

        Rules are tried as PascalCase, camelCase, snake_case, kebab-case,
        UPPER_SNAKE_CASE. Ties resolve by that order, so "word" is camelCase
        and "WORD" is PascalCase.
        """
        for convention, pattern in self.patterns:
            if pattern.fullmatch(text):
                return convention
        return NamingConvention.UNKNOWN


def guess_naming_convention(text: str, *, digits: bool = False) -> NamingConvention:
    """Guess the naming convention of a string, UNKNOWN if none fits."""
    return ConventionClassifier(digits=digits).guess(text)
