"""
Wrapper registry for field rendering.

A wrapper is the markup around one form field: an outer tag holding an
ordered list of components. Wrappers are configured by name in
``FORM_ERRORS["WRAPPERS"]``::

    "WRAPPERS": {
        "with_full_error": {
            "tag": "div",
            "class": "input",
            "components": [
                "label",
                "input",
                ("full_error", {"wrap_with": {"tag": "span", "class": "error"}}),
            ],
        },
    }

Components render in order and empty components are skipped.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString

from form_errors.composer import ErrorComposer, class_names, content_tag
from form_errors.conf import form_errors_settings
from form_errors.exceptions import FormErrorsConfigurationError

COMPONENTS = ("label", "input", "hint", "error", "full_error")


@dataclass(frozen=True)
class Component:
    """One named part of a wrapper with optional ``wrap_with`` overrides."""

    name: str
    wrap_with: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def parse(cls, definition: Any) -> "Component":
        if isinstance(definition, str):
            name, options = definition, {}
        else:
            name, options = definition
        if name not in COMPONENTS:
            raise FormErrorsConfigurationError(
                f"Unknown wrapper component {name!r}; expected one of {', '.join(COMPONENTS)}"
            )
        return cls(name=name, wrap_with=dict(options.get("wrap_with") or {}))

    def render(self, composer: ErrorComposer) -> Optional[SafeString]:
        renderer = getattr(self, f"render_{self.name}")
        return renderer(composer)

    def render_label(self, composer: ErrorComposer) -> SafeString:
        record, attribute = composer.record, composer.attribute
        text = composer.options.label
        if text is None:
            text = record.human_attribute_name(attribute) if record else attribute
        html_for = record.id_for(attribute) if record else f"id_{attribute}"
        attrs = {"for": html_for}
        if self.wrap_with.get("class"):
            attrs["class"] = self.wrap_with["class"]
        return content_tag(self.wrap_with.get("tag", "label"), text, attrs)

    def render_input(self, composer: ErrorComposer) -> SafeString:
        record, attribute = composer.record, composer.attribute
        attrs = dict(composer.options.input_html)
        if self.wrap_with.get("class"):
            attrs["class"] = class_names(self.wrap_with["class"], attrs.get("class"))
        if record is None:
            return format_html(
                '<input type="text" name="{}" id="id_{}">', attribute, attribute
            )
        return record.render_input(attribute, attrs)

    def render_hint(self, composer: ErrorComposer) -> Optional[SafeString]:
        hint = composer.options.hint
        if not hint:
            return None
        config = composer.config
        return content_tag(
            self.wrap_with.get("tag", config["HINT_TAG"]),
            hint,
            {"class": self.wrap_with.get("class", config["HINT_CLASS"])},
        )

    def render_error(self, composer: ErrorComposer) -> Optional[SafeString]:
        return composer.render(self.wrap_with)

    def render_full_error(self, composer: ErrorComposer) -> Optional[SafeString]:
        return composer.render_full_error(self.wrap_with)


@dataclass(frozen=True)
class Wrapper:
    """A named field wrapper: outer tag, classes and components."""

    name: str
    tag: Optional[str] = "div"
    html_class: Any = None
    error_class: Any = "field_with_errors"
    components: Tuple[Component, ...] = ()

    @classmethod
    def from_config(cls, name: str, definition: Mapping[str, Any]) -> "Wrapper":
        return cls(
            name=name,
            tag=definition.get("tag", "div"),
            html_class=definition.get("class"),
            error_class=definition.get("error_class", "field_with_errors"),
            components=tuple(
                Component.parse(item) for item in definition.get("components", ())
            ),
        )

    def find(self, name: str) -> Optional[Component]:
        """Return the first component called ``name``, if any."""
        for component in self.components:
            if component.name == name:
                return component
        return None

    def render(self, composer: ErrorComposer) -> SafeString:
        parts: List[SafeString] = []
        for component in self.components:
            html = component.render(composer)
            if html:
                parts.append(html)
        content = format_html_join("", "{}", ((part,) for part in parts))
        if not self.tag:
            return content

        classes = [self.html_class]
        if composer.has_errors() and not composer.options.disabled:
            classes.append(self.error_class)
        return content_tag(self.tag, content, {"class": class_names(*classes) or None})


def get_wrapper(name: Optional[str] = None) -> Wrapper:
    """
    Look up a configured wrapper.

    Raises:
        FormErrorsConfigurationError: If no wrapper has that name.
    """
    config = form_errors_settings()
    name = name or config["DEFAULT_WRAPPER"]
    try:
        definition = config["WRAPPERS"][name]
    except KeyError:
        raise FormErrorsConfigurationError(f"Unknown wrapper {name!r}") from None
    return Wrapper.from_config(name, definition)
