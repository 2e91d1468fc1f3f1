"""
Settings access for the form_errors app.

All configuration lives in a single ``FORM_ERRORS`` dict in the Django
settings module. Values are read on every call so ``override_settings``
takes effect immediately in tests.

Example:
    FORM_ERRORS = {
        "ERROR_METHOD": "to_sentence",
        "ERROR_CLASS": "invalid-feedback",
        "WRAPPERS": {
            "compact": {
                "tag": "div",
                "class": "compact",
                "components": ["input", ("error", {"wrap_with": {"tag": "p"}})],
            },
        },
    }
"""

from typing import Any, Dict

from django.conf import settings

DEFAULT_WRAPPER_NAME = "default"

DEFAULTS: Dict[str, Any] = {
    "ERROR_METHOD": "all",
    "ERROR_CLASS": "error",
    "ERROR_TAG": "span",
    "ERROR_SEPARATOR": ", ",
    "HINT_CLASS": "hint",
    "HINT_TAG": "span",
    "DEFAULT_WRAPPER": DEFAULT_WRAPPER_NAME,
    "WRAPPERS": {
        DEFAULT_WRAPPER_NAME: {
            "tag": "div",
            "class": "input",
            "components": ["label", "input", "hint", "error"],
        },
    },
}


def form_errors_settings() -> Dict[str, Any]:
    """Return the ``FORM_ERRORS`` setting merged over the defaults."""
    configured = getattr(settings, "FORM_ERRORS", None) or {}
    merged = dict(DEFAULTS)
    merged.update(configured)

    # Custom wrappers extend the built-in ones instead of replacing them
    wrappers = dict(DEFAULTS["WRAPPERS"])
    wrappers.update(configured.get("WRAPPERS", {}))
    merged["WRAPPERS"] = wrappers
    return merged
