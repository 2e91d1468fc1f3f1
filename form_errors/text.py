"""
Text helpers shared by the error composer and the records.
"""

from typing import Sequence

from django.forms.utils import pretty_name
from django.utils.translation import gettext


def humanize(attribute: str) -> str:
    """
    Turn an attribute name into a human readable label.

    A trailing ``_id`` is dropped so foreign key columns read like their
    relation.

    Examples:
        >>> humanize("first_name")
        'First name'
        >>> humanize("company_id")
        'Company'
    """
    name = str(attribute)
    if name.endswith("_id") and len(name) > 3:
        name = name[: -len("_id")]
    return pretty_name(name)


def to_sentence(items: Sequence[str]) -> str:
    """
    Join items into a natural language list.

    Examples:
        >>> to_sentence(["is not a number", "must be greater than 18"])
        'is not a number and must be greater than 18'
        >>> to_sentence(["a", "b", "c"])
        'a, b, and c'
    """
    items = [str(item) for item in items]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]

    connector = gettext("and")
    if len(items) == 2:
        return f"{items[0]} {connector} {items[1]}"
    return f"{', '.join(items[:-1])}, {connector} {items[-1]}"
