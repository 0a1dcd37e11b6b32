"""
Utility functions for the markdown data model to code generator.
"""

import re

# Anything that is not a letter or a digit separates words (Unicode aware)
_SEPARATOR_PATTERN = re.compile(r"[\W_]+")


def _is_boundary(previous: str, current: str, following: str) -> bool:
    """Whether a new word starts at `current`."""
    if previous.isdigit() != current.isdigit():
        return True
    if current.isupper() and previous.islower():
        return True
    # End of an acronym: "HTTPServer" splits before the "S"
    return current.isupper() and previous.isupper() and following.islower()


def _split_chunk(chunk: str) -> list[str]:
    """Split a separator-free chunk on case and digit boundaries."""
    words: list[str] = []
    start = 0
    for i in range(1, len(chunk)):
        following = chunk[i + 1] if i + 1 < len(chunk) else ""
        if _is_boundary(chunk[i - 1], chunk[i], following):
            words.append(chunk[start:i])
            start = i
    if chunk:
        words.append(chunk[start:])
    return words


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    words: list[str] = []
    for chunk in _SEPARATOR_PATTERN.split(text):
        words.extend(_split_chunk(chunk))
    return words


def to_upper_camel_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to UpperCamelCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"
        "größe" -> "Größe"
        "a" -> "A"

    Args:
        text: The text to convert

    Returns:
        UpperCamelCase string
    """
    if not text:
        return ""
    return "".join(word.capitalize() for word in _split_into_words(text))


def to_snake_case(text: str) -> str:
    """Convert any cased text to lower snake_case.

    Examples:
        "MyModel" -> "my_model"
        "HTTPServer" -> "http_server"
        "Test Model 2" -> "test_model_2"
        "Modèle" -> "modèle"
    """
    return "_".join(word.lower() for word in _split_into_words(text))
