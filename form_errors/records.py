"""
Records expose validation errors to the error composer.

A record is anything that can answer "which messages are attached to this
attribute". Support for error introspection is an explicit capability:
an object has it when it is a ``Record`` or when ``as_record`` knows how to
adapt it (Django forms and model instances). Everything else, including a
missing object, has no errors to render.

Usage:
    record = FormRecord(form)
    record.errors_for("email")            # ["Enter a valid email address."]

    record = ModelRecord(user, errors=exc)  # exc is a ValidationError
    record.full_messages_for("name")      # ["Name can't be blank"]
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from django import forms
from django.core.exceptions import NON_FIELD_ERRORS, FieldDoesNotExist, ValidationError
from django.db import models
from django.utils.safestring import SafeString
from django.utils.text import capfirst

from form_errors.text import humanize

logger = logging.getLogger(__name__)

ErrorsInput = Union[ValidationError, Mapping[str, Any], None]


def normalize_errors(errors: ErrorsInput) -> Dict[str, List[str]]:
    """
    Turn a ``ValidationError`` or an error mapping into ``{attribute: [messages]}``.

    Single string values are wrapped in a list. Message order is preserved.
    """
    if errors is None:
        return {}

    if isinstance(errors, ValidationError):
        if hasattr(errors, "error_dict"):
            errors = errors.message_dict
        else:
            errors = {NON_FIELD_ERRORS: errors.messages}

    normalized: Dict[str, List[str]] = {}
    for attribute, messages in errors.items():
        if isinstance(messages, str):
            messages = [messages]
        normalized[str(attribute)] = [
            message if isinstance(message, SafeString) else str(message)
            for message in messages
        ]
    return normalized


class Record(ABC):
    """Something that carries validation errors keyed by attribute name."""

    @abstractmethod
    def errors_for(self, attribute: str) -> List[str]:
        """Return the error messages for ``attribute``, in order."""

    def human_attribute_name(self, attribute: str) -> str:
        return humanize(attribute)

    def full_messages_for(self, attribute: str) -> List[str]:
        """Return the messages for ``attribute`` prefixed with its label."""
        label = self.human_attribute_name(attribute)
        return [f"{label} {message}" for message in self.errors_for(attribute)]

    def has_errors(self, attribute: str) -> bool:
        return bool(self.errors_for(attribute))

    def model_class(self) -> Optional[Type[models.Model]]:
        """Return the model behind this record, if there is one."""
        return None

    def value_for(self, attribute: str) -> Any:
        return None

    def id_for(self, attribute: str) -> str:
        return f"id_{attribute}"

    def render_input(self, attribute: str, attrs: Optional[Dict[str, Any]] = None) -> SafeString:
        """Render a plain text input for ``attribute``."""
        widget_attrs = {"id": self.id_for(attribute)}
        widget_attrs.update(attrs or {})
        return forms.TextInput().render(
            attribute, self.value_for(attribute), attrs=widget_attrs
        )


class ErrorMapRecord(Record):
    """
    A record backed by a plain mapping of errors.

    Attributes:
        errors: ``{attribute: [messages]}``
        labels: Optional human readable names per attribute
        values: Optional current values per attribute
    """

    def __init__(
        self,
        errors: ErrorsInput = None,
        labels: Optional[Mapping[str, str]] = None,
        values: Optional[Mapping[str, Any]] = None,
    ):
        self.errors = normalize_errors(errors)
        self.labels = dict(labels or {})
        self.values = dict(values or {})

    def errors_for(self, attribute: str) -> List[str]:
        return list(self.errors.get(str(attribute), []))

    def human_attribute_name(self, attribute: str) -> str:
        if attribute in self.labels:
            return self.labels[attribute]
        return super().human_attribute_name(attribute)

    def value_for(self, attribute: str) -> Any:
        return self.values.get(attribute)


class ModelRecord(ErrorMapRecord):
    """
    A Django model instance together with its validation errors.

    Model instances do not keep errors themselves, so the errors from
    ``full_clean()`` (or any mapping) are handed in explicitly. Labels come
    from the model fields' ``verbose_name``.

    Examples:
        >>> try:
        ...     user.full_clean()
        ... except ValidationError as exc:
        ...     record = ModelRecord(user, errors=exc)
    """

    def __init__(self, instance: models.Model, errors: ErrorsInput = None):
        super().__init__(errors)
        self.instance = instance

    def model_class(self) -> Optional[Type[models.Model]]:
        return type(self.instance)

    def _model_field(self, attribute: str):
        try:
            return self.instance._meta.get_field(attribute)
        except FieldDoesNotExist:
            return None

    def human_attribute_name(self, attribute: str) -> str:
        model_field = self._model_field(attribute)
        verbose_name = getattr(model_field, "verbose_name", None)
        if verbose_name:
            return str(capfirst(verbose_name))
        return humanize(attribute)

    def value_for(self, attribute: str) -> Any:
        model_field = self._model_field(attribute)
        if model_field is not None and model_field.concrete:
            return getattr(self.instance, model_field.attname)
        return None


class FormRecord(Record):
    """
    A Django form as a record.

    Errors come from ``form.errors``, so a bound form is validated the first
    time errors are read. Labels and widgets come from the form fields.
    """

    def __init__(self, form: forms.BaseForm):
        self.form = form

    def model_class(self) -> Optional[Type[models.Model]]:
        if isinstance(self.form, forms.BaseModelForm):
            return self.form._meta.model
        return None

    def errors_for(self, attribute: str) -> List[str]:
        return [str(message) for message in self.form.errors.get(attribute, [])]

    def human_attribute_name(self, attribute: str) -> str:
        if attribute in self.form.fields:
            return str(self.form[attribute].label)
        return super().human_attribute_name(attribute)

    def value_for(self, attribute: str) -> Any:
        if attribute in self.form.fields:
            return self.form[attribute].value()
        return None

    def id_for(self, attribute: str) -> str:
        if attribute in self.form.fields:
            return self.form[attribute].id_for_label or super().id_for(attribute)
        return super().id_for(attribute)

    def render_input(self, attribute: str, attrs: Optional[Dict[str, Any]] = None) -> SafeString:
        if attribute in self.form.fields:
            return self.form[attribute].as_widget(attrs=attrs)
        return super().render_input(attribute, attrs)


def as_record(obj: Any) -> Optional[Record]:
    """
    Adapt ``obj`` to a ``Record``.

    Returns ``None`` when ``obj`` is missing or cannot report errors, in which
    case nothing should be rendered.
    """
    if obj is None:
        logger.debug("No record given, skipping error rendering")
        return None
    if isinstance(obj, Record):
        return obj
    if isinstance(obj, forms.BaseForm):
        return FormRecord(obj)
    if isinstance(obj, models.Model):
        return ModelRecord(obj)

    logger.debug("%s does not support error introspection", type(obj).__name__)
    return None
