"""Tests for naming convention classification."""

import pytest

from naming_convention.classifier import ConventionClassifier, guess_naming_convention
from naming_convention.naming_convention import NamingConvention


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("PascalCase", NamingConvention.PASCAL_CASE),
        ("camelCase", NamingConvention.CAMEL_CASE),
        ("snake_case", NamingConvention.SNAKE_CASE),
        ("kebab-case", NamingConvention.KEBAB_CASE),
        ("UPPER_SNAKE", NamingConvention.UPPER_SNAKE_CASE),
        ("this_Is-UnknownCase", NamingConvention.UNKNOWN),
    ],
)
def test_guess_naming_convention(text: str, expected: NamingConvention) -> None:
    """Verify classification of one example per convention."""
    assert guess_naming_convention(text) == expected


def test_guess_tie_breaks() -> None:
    """Verify that ambiguous strings resolve by rule order."""
    # A bare lowercase word fits camelCase, snake_case and kebab-case.
    assert guess_naming_convention("word") == NamingConvention.CAMEL_CASE
    # Each capital is its own PascalCase group.
    assert guess_naming_convention("WORD") == NamingConvention.PASCAL_CASE
    assert guess_naming_convention("HTMLParser") == NamingConvention.PASCAL_CASE


@pytest.mark.parametrize(
    "text",
    [
        "",
        "_snake",
        "snake_",
        "snake__case",
        "kebab--case",
        "-kebab",
        "Snake_case",
        "UPPER-KEBAB",
        "UPPER__SNAKE",
        "with space",
        "snake_case\n",
        "PascalCase\n",
        "camelCase!",
        "Vector3",
        "snake_case_00",
    ],
)
def test_guess_rejects_malformed(text: str) -> None:
    """Verify that partial or inconsistent matches are UNKNOWN."""
    assert guess_naming_convention(text) == NamingConvention.UNKNOWN


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("PascalCase00", NamingConvention.PASCAL_CASE),
        ("Vector3D", NamingConvention.PASCAL_CASE),
        ("camelCase00", NamingConvention.CAMEL_CASE),
        ("snake_case_00", NamingConvention.SNAKE_CASE),
        ("kebab-case-00", NamingConvention.KEBAB_CASE),
        ("UPPER_SNAKE_CASE_00", NamingConvention.UPPER_SNAKE_CASE),
        ("00_UPPER", NamingConvention.UPPER_SNAKE_CASE),
    ],
)
def test_guess_with_digits(text: str, expected: NamingConvention) -> None:
    """Verify that digits are accepted inside words when enabled."""
    assert guess_naming_convention(text, digits=True) == expected


def test_guess_leading_digit_with_digits() -> None:
    """Verify that a leading digit opens a PascalCase group when enabled."""
    c = ConventionClassifier(digits=True)
    assert c.guess("2fast") == NamingConvention.PASCAL_CASE
    assert c.guess("00_snake") == NamingConvention.SNAKE_CASE


def test_classifier_is_reusable() -> None:
    """Verify that one classifier instance classifies many strings."""
    c = ConventionClassifier()
    results = [c.guess(s) for s in ["PascalCase", "snake_case", "??"]]
    assert results == [
        NamingConvention.PASCAL_CASE,
        NamingConvention.SNAKE_CASE,
        NamingConvention.UNKNOWN,
    ]


@pytest.mark.parametrize(
    "text", ["", "a", "A", "_", "a-B_c", "ÄÖÜ", "🐍", "x" * 1000, "\t\n"]
)
def test_guess_is_total(text: str) -> None:
    """Verify that every input maps to exactly one convention."""
    assert isinstance(guess_naming_convention(text), NamingConvention)
    assert isinstance(guess_naming_convention(text, digits=True), NamingConvention)


def test_classifier_rules_are_fixed() -> None:
    """Verify that the rule order is an immutable tuple."""
    rules = ConventionClassifier().patterns
    assert isinstance(rules, tuple)
    assert [convention for convention, _ in rules] == [
        NamingConvention.PASCAL_CASE,
        NamingConvention.CAMEL_CASE,
        NamingConvention.SNAKE_CASE,
        NamingConvention.KEBAB_CASE,
        NamingConvention.UPPER_SNAKE_CASE,
    ]
