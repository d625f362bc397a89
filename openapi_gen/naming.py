"""Convert schema names into C# identifiers.

Examples:
  #/definitions/apiAccount -> ApiAccount   (convert_ref_to_class_name)
  user_id                  -> UserId       (snake_case_to_pascal_case)
  create_time              -> CreateTime
  "line one\\nline two"     -> "line one line two"   (strip_newlines)

All functions are pure and accept any string.
"""

from __future__ import annotations

_DEFINITIONS_PREFIX = "#/definitions/"

# Case changes only touch ASCII letters, so output length always matches input
_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def _is_word_char(char: str) -> bool:
    # letters and digits of any script count, like underscore
    return char.isalnum() or char == "_"


def title(text: str) -> str:
    """Uppercase the first ASCII letter of each word, leaving the rest untouched.

    Unlike ``str.title`` this does not lowercase the remaining letters, so
    ``apiAccount`` becomes ``ApiAccount`` rather than ``Apiaccount``.
    """
    chars = []
    previous = " "
    for char in text:
        if not _is_word_char(previous):
            chars.append(char.translate(_ASCII_UPPER))
        else:
            chars.append(char)
        previous = char
    return "".join(chars)


def uppercase(text: str) -> str:
    """Uppercase ASCII letters; every other character is left as is."""
    return text.translate(_ASCII_UPPER)


def convert_ref_to_class_name(ref: str) -> str:
    """Turn ``#/definitions/Name`` into a class name.

    References without the prefix are titled as they are.
    """
    if ref.startswith(_DEFINITIONS_PREFIX):
        ref = ref[len(_DEFINITIONS_PREFIX):]
    return title(ref)


def snake_case_to_pascal_case(name: str) -> str:
    """Convert snake_case to PascalCase.

    Each underscore is dropped and uppercases the next character, including
    leading and repeated underscores. A trailing underscore adds nothing.
    Digits and existing capitals are kept as they are.
    """
    chars = []
    upper_next = True
    for char in name:
        if char == "_":
            upper_next = True
            continue
        if upper_next:
            chars.append(char.translate(_ASCII_UPPER))
            upper_next = False
        else:
            chars.append(char)
    return "".join(chars)


def strip_newlines(text: str) -> str:
    """Replace each newline with a single space."""
    return text.replace("\n", " ")
