"""
Render options for error elements.

Callers pass keyword arguments (or a mapping) mixing configuration keys such
as ``error_prefix`` with HTML attributes such as ``id``. ``RenderOptions``
separates the two so configuration never leaks into the markup, and builds
a new object instead of touching the caller's mapping.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional, Union

from form_errors.reflection import Reflection

ErrorMethod = Union[str, Callable[[list], Any]]

# Keys consumed by the renderer; everything else is an HTML attribute.
OPTION_KEYS = frozenset(
    {
        "error",
        "full_error",
        "error_method",
        "error_prefix",
        "error_tag",
        "error_html",
        "reflection",
        "hint",
        "label",
        "input_html",
        "wrapper",
    }
)


def html_attribute_name(key: str) -> str:
    """
    Map a Python keyword to an HTML attribute name.

    Examples:
        >>> html_attribute_name("class_")
        'class'
        >>> html_attribute_name("data_role")
        'data-role'
    """
    return key.rstrip("_").replace("_", "-")


def html_attributes(values: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    return {html_attribute_name(str(key)): value for key, value in (values or {}).items()}


@dataclass(frozen=True)
class RenderOptions:
    """
    Typed options for one error element.

    Attributes:
        error: ``False`` disables rendering, any other non-boolean value replaces the message
        full_error: ``False`` disables the full error variant
        error_method: ``"first"``, ``"to_sentence"``, ``"all"`` or a callable
        error_prefix: Text placed before the message, escaped unless safe
        error_tag: Tag of the wrapper element
        html_attrs: HTML attributes for the wrapper element
        reflection: Association whose errors are rendered too
        hint: Hint text for field rendering
        label: Label text for field rendering
        input_html: HTML attributes for the rendered input
        wrapper: Wrapper name for field rendering
    """

    error: Any = None
    full_error: Optional[bool] = None
    error_method: Optional[ErrorMethod] = None
    error_prefix: Optional[str] = None
    error_tag: Optional[str] = None
    html_attrs: Dict[str, Any] = field(default_factory=dict)
    reflection: Optional[Reflection] = None
    hint: Optional[str] = None
    label: Optional[str] = None
    input_html: Dict[str, Any] = field(default_factory=dict)
    wrapper: Optional[str] = None

    @classmethod
    def from_mapping(
        cls, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> "RenderOptions":
        """
        Build options from a mapping and/or keyword arguments.

        Keyword arguments win over the mapping. Neither input is modified.
        """
        values = dict(options or {})
        values.update(kwargs)

        attrs = html_attributes(values.pop("error_html", None))
        config = {key: values.pop(key) for key in list(values) if key in OPTION_KEYS}
        attrs.update(html_attributes(values))

        return cls(
            html_attrs=attrs,
            input_html=html_attributes(config.pop("input_html", None)),
            **config,
        )

    @property
    def has_custom_error(self) -> bool:
        return self.error is not None and not isinstance(self.error, bool)

    @property
    def disabled(self) -> bool:
        return self.error is False

    def merge(self, **changes: Any) -> "RenderOptions":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)
