"""
Error message composition and rendering.

``ErrorComposer`` turns the validation errors of one record attribute into
at most one HTML element, for example::

    <span class="error">can't be blank</span>

Composition rules:
1. ``error=False`` (or ``full_error=False`` for full errors) renders nothing.
2. A string ``error`` replaces the message, but only when the attribute
   actually has errors.
3. Messages on the attribute come first, then messages on its association.
4. Messages are joined with the configured error method.
5. ``error_prefix`` is placed before the message, escaped unless it is a
   ``SafeString``.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from django.forms.utils import flatatt
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import SafeString

from form_errors.conf import form_errors_settings
from form_errors.exceptions import FormErrorsConfigurationError
from form_errors.options import RenderOptions
from form_errors.records import Record
from form_errors.text import to_sentence

logger = logging.getLogger(__name__)


def _first(messages: List[str], separator: str) -> str:
    return messages[0]


def _to_sentence(messages: List[str], separator: str) -> str:
    return to_sentence(messages)


def _all(messages: List[str], separator: str) -> str:
    return separator.join(str(message) for message in messages)


ERROR_METHODS: Dict[str, Callable[[List[str], str], str]] = {
    "first": _first,
    "to_sentence": _to_sentence,
    "all": _all,
}


def join_messages(messages: List[str], method: Any, separator: str) -> Any:
    """
    Join ``messages`` with an error method name or callable.

    Raises:
        FormErrorsConfigurationError: If ``method`` is an unknown name.
    """
    if callable(method):
        return method(list(messages))
    try:
        strategy = ERROR_METHODS[str(method)]
    except KeyError:
        raise FormErrorsConfigurationError(
            f"Unknown error method {method!r}; expected one of "
            f"{', '.join(sorted(ERROR_METHODS))} or a callable"
        ) from None
    return strategy(messages, separator)


def class_names(*values: Any) -> str:
    """Merge class values (strings or lists) into one class attribute."""
    names: List[str] = []
    for value in values:
        if not value:
            continue
        if isinstance(value, (list, tuple)):
            names.extend(str(item) for item in value if item)
        else:
            names.append(str(value))
    return " ".join(names)


def content_tag(tag: str, content: Any, attrs: Optional[Mapping[str, Any]] = None) -> SafeString:
    """Render ``<tag attrs>content</tag>``; ``content`` is escaped unless safe."""
    return format_html(
        "<{tag}{attrs}>{content}</{tag}>",
        tag=tag,
        attrs=flatatt(dict(attrs or {})),
        content=content,
    )


class ErrorComposer:
    """
    Compose the error element for one attribute of a record.

    Attributes:
        record: The record carrying errors, or ``None``
        attribute: Attribute name
        options: Render options for this element
    """

    def __init__(
        self,
        record: Optional[Record],
        attribute: str,
        options: Optional[RenderOptions] = None,
    ):
        self.record = record
        self.attribute = str(attribute)
        self.options = options or RenderOptions()
        self.config = form_errors_settings()

    @property
    def association_name(self) -> Optional[str]:
        reflection = self.options.reflection
        if reflection is None or reflection.name == self.attribute:
            return None
        return reflection.name

    @property
    def errors(self) -> List[str]:
        """Messages on the attribute followed by messages on its association."""
        if self.record is None:
            return []
        messages = self.record.errors_for(self.attribute)
        if self.association_name:
            messages = messages + self.record.errors_for(self.association_name)
        return messages

    @property
    def full_errors(self) -> List[str]:
        if self.record is None:
            return []
        messages = self.record.full_messages_for(self.attribute)
        if self.association_name:
            messages = messages + self.record.full_messages_for(self.association_name)
        return messages

    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_method(self) -> Any:
        return self.options.error_method or self.config["ERROR_METHOD"]

    def join(self, messages: List[str]) -> Any:
        return join_messages(messages, self.error_method, self.config["ERROR_SEPARATOR"])

    def error_text(self) -> SafeString:
        """Return the escaped message, with the prefix when one is set."""
        if self.options.has_custom_error:
            text = self.options.error
        else:
            text = self.join(self.errors)

        prefix = self.options.error_prefix
        if prefix:
            return format_html("{} {}", prefix, text)
        return conditional_escape(text)

    def full_error_text(self) -> SafeString:
        """Return the escaped full messages (label followed by message)."""
        if self.options.has_custom_error:
            return conditional_escape(self.options.error)
        return conditional_escape(self.join(self.full_errors))

    def element_attrs(self, wrap_with: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        wrap_with = wrap_with or {}
        attrs = dict(self.options.html_attrs)
        base_class = wrap_with.get("class", self.config["ERROR_CLASS"])
        attrs["class"] = class_names(base_class, attrs.get("class"))
        return attrs

    def element_tag(self, wrap_with: Optional[Mapping[str, Any]] = None) -> str:
        wrap_with = wrap_with or {}
        return str(self.options.error_tag or wrap_with.get("tag") or self.config["ERROR_TAG"])

    def render(self, wrap_with: Optional[Mapping[str, Any]] = None) -> Optional[SafeString]:
        """Render the error element, or ``None`` when there is nothing to show."""
        if self.options.disabled:
            logger.debug("Error rendering disabled for %s", self.attribute)
            return None
        if not self.has_errors():
            return None
        return content_tag(
            self.element_tag(wrap_with), self.error_text(), self.element_attrs(wrap_with)
        )

    def render_full_error(
        self, wrap_with: Optional[Mapping[str, Any]] = None
    ) -> Optional[SafeString]:
        """Render the full error element, or ``None`` when there is nothing to show."""
        if self.options.disabled or self.options.full_error is False:
            return None
        if not self.has_errors():
            return None
        return content_tag(
            self.element_tag(wrap_with),
            self.full_error_text(),
            self.element_attrs(wrap_with),
        )
