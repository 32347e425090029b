"""Logic for rendering text in a target naming convention."""

import logging

from naming_convention.naming_convention import NamingConvention
from naming_convention.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def capitalize_token(token: str) -> str:
    """Lowercase a token, then uppercase its first character.

    Uses full case mapping, so the first character may expand ("ß" -> "SS").
    """
    lowered = token.lower()
    return lowered[:1].upper() + lowered[1:]


class CaseConverter:
    """Tokenizes text and joins the tokens back in a chosen convention."""

    def __init__(self, tokenizer: Tokenizer | None = None) -> None:
        """Initialize the converter with the tokenizer used to split input."""
        self.tokenizer = tokenizer or Tokenizer()

    def to_pascal_case(self, text: str) -> str:
        """Convert text to PascalCase."""
        return "".join(capitalize_token(t) for t in self.tokenizer.tokenize(text))

    def to_camel_case(self, text: str) -> str:
        """Convert text to camelCase."""
        tokens = self.tokenizer.tokenize(text)
        if not tokens:
            return ""
        head, *rest = tokens
        return head.lower() + "".join(capitalize_token(t) for t in rest)

    def to_snake_case(self, text: str) -> str:
        """Convert text to snake_case."""
        return "_".join(t.lower() for t in self.tokenizer.tokenize(text))

    def to_upper_snake_case(self, text: str) -> str:
        """Convert text to UPPER_SNAKE_CASE."""
        return "_".join(t.upper() for t in self.tokenizer.tokenize(text))

    def to_kebab_case(self, text: str) -> str:
        """Convert text to kebab-case."""
        return "-".join(t.lower() for t in self.tokenizer.tokenize(text))

    def convert_to(self, text: str, convention: NamingConvention) -> str:
        """Convert text to the given convention; UNKNOWN renders as ""."""
        renderers = {
            NamingConvention.PASCAL_CASE: self.to_pascal_case,
            NamingConvention.CAMEL_CASE: self.to_camel_case,
            NamingConvention.SNAKE_CASE: self.to_snake_case,
            NamingConvention.KEBAB_CASE: self.to_kebab_case,
            NamingConvention.UPPER_SNAKE_CASE: self.to_upper_snake_case,
        }
        render = renderers.get(convention)
        if render is None:
            logger.debug("No renderer for %s, returning empty string", convention)
            return ""
        return render(text)


def _converter(digits: bool) -> CaseConverter:
    return CaseConverter(Tokenizer(digits=digits))


def to_pascal_case(text: str, *, digits: bool = False) -> str:
    """Convert text to PascalCase, e.g. "kebab-case" -> "KebabCase"."""
    return _converter(digits).to_pascal_case(text)


def to_camel_case(text: str, *, digits: bool = False) -> str:
    """Convert text to camelCase, e.g. "UPPER_SNAKE_CASE" -> "upperSnakeCase"."""
    return _converter(digits).to_camel_case(text)


def to_snake_case(text: str, *, digits: bool = False) -> str:
    """Convert text to snake_case, e.g. "snakeCase" -> "snake_case"."""
    return _converter(digits).to_snake_case(text)


def to_upper_snake_case(text: str, *, digits: bool = False) -> str:
    """Convert text to UPPER_SNAKE_CASE."""
    return _converter(digits).to_upper_snake_case(text)


def to_kebab_case(text: str, *, digits: bool = False) -> str:
    """Convert text to kebab-case."""
    return _converter(digits).to_kebab_case(text)


def convert_to(
    text: str, convention: NamingConvention, *, digits: bool = False
) -> str:
    """Convert text to the given convention; UNKNOWN renders as ""."""
    return _converter(digits).convert_to(text, convention)
