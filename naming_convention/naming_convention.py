"""The closed set of naming conventions recognised by the engine."""

from enum import Enum


class NamingConvention(Enum):
    """A naming style: per-word capitalisation plus a word separator."""

    PASCAL_CASE = "PascalCase"
    CAMEL_CASE = "camelCase"
    SNAKE_CASE = "snake_case"
    KEBAB_CASE = "kebab-case"
    UPPER_SNAKE_CASE = "UPPER_SNAKE_CASE"
    UNKNOWN = "unknown"
