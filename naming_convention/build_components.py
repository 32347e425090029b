"""Assembly of configured engine components."""

from dataclasses import dataclass
from typing import Any

from naming_convention.classifier import ConventionClassifier
from naming_convention.conversion import CaseConverter
from naming_convention.tokenizer import Tokenizer


@dataclass(frozen=True)
class Components:
    """A tokenizer, classifier and converter built from one configuration."""

    tokenizer: Tokenizer
    classifier: ConventionClassifier
    converter: CaseConverter


def _digits_option(config: dict[str, Any], section: str) -> bool:
    options = config.get(section, {})
    if not isinstance(options, dict):
        msg = f"'{section}' must be a mapping, got {options!r}"
        raise TypeError(msg)
    value = options.get("digits", False)
    if not isinstance(value, bool):
        msg = f"'{section}.digits' must be true or false, got {value!r}"
        raise TypeError(msg)
    return value


def build_components(config: dict[str, Any]) -> Components:
    """Build the engine components described by a loaded configuration."""
    tokenizer = Tokenizer(digits=_digits_option(config, "tokenizer"))
    classifier = ConventionClassifier(digits=_digits_option(config, "classifier"))
    return Components(
        tokenizer=tokenizer,
        classifier=classifier,
        converter=CaseConverter(tokenizer),
    )
