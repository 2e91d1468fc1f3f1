"""
Form builder entry points.

``FormBuilder`` wraps a form, a model instance or any ``Record`` and renders
error elements and wrapped fields for its attributes.

Usage:
    builder = FormBuilder(form)
    builder.error("name")                        # <span class="error">...</span>
    builder.error("age", error_method="to_sentence", id="age_error")
    builder.full_error("name")                   # label + message
    builder.field("email", hint="We never share it")
    builder.association("company", error_method="to_sentence")

Options may be given as keyword arguments, as a mapping, or both. The
mapping is never modified.
"""

import logging
from typing import Any, Mapping, Optional

from django.utils.safestring import SafeString

from form_errors.composer import ErrorComposer
from form_errors.exceptions import FormErrorsConfigurationError
from form_errors.options import RenderOptions
from form_errors.records import FormRecord, Record, as_record
from form_errors.reflection import reflection_for
from form_errors.wrappers import Wrapper, get_wrapper

logger = logging.getLogger(__name__)


class FormBuilder:
    """Render errors and fields for one record."""

    def __init__(self, obj: Any, wrapper: Optional[str] = None):
        self.object = obj
        self.record: Optional[Record] = as_record(obj)
        self.wrapper_name = wrapper

    def wrapper(self, name: Optional[str] = None) -> Wrapper:
        return get_wrapper(name or self.wrapper_name)

    def error(
        self, attribute: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> Optional[SafeString]:
        """
        Render the error element for ``attribute``.

        Uses the ``wrap_with`` settings of the wrapper's ``error`` component
        when the wrapper has one.
        """
        render_options = RenderOptions.from_mapping(options, **kwargs)
        return self._render_error(attribute, render_options)

    def full_error(
        self, attribute: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> Optional[SafeString]:
        """
        Render the error element for ``attribute`` prefixed with its label.

        An explicit ``error_prefix`` replaces the label.
        """
        render_options = RenderOptions.from_mapping(options, **kwargs)
        if render_options.full_error is False:
            return None
        if render_options.error_prefix is None and self.record is not None:
            render_options = render_options.merge(
                error_prefix=self.record.human_attribute_name(attribute)
            )
        return self._render_error(attribute, render_options)

    def field(
        self, attribute: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> SafeString:
        """Render ``attribute`` inside its wrapper (label, input, hint, errors)."""
        render_options = RenderOptions.from_mapping(options, **kwargs)
        wrapper = self.wrapper(render_options.wrapper)
        return wrapper.render(ErrorComposer(self.record, attribute, render_options))

    def association(
        self, name: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> SafeString:
        """
        Render the field for a foreign key, including errors on the relation.

        The field is rendered under the form field name for model forms and
        under the column name (``company_id``) otherwise.

        Raises:
            FormErrorsConfigurationError: If the record has no model or
                ``name`` is not a single-valued relation.
            FieldDoesNotExist: If the model has no such field.
        """
        model = self.record.model_class() if self.record is not None else None
        if model is None:
            raise FormErrorsConfigurationError(
                f"Cannot look up association {name!r} without a model"
            )

        reflection = reflection_for(model, name)
        if reflection is None:
            raise FormErrorsConfigurationError(
                f"{model.__name__}.{name} is not an association"
            )

        attribute = reflection.options["attname"]
        if isinstance(self.record, FormRecord) and reflection.name in self.record.form.fields:
            attribute = reflection.name
        logger.debug("Rendering association %s as field %s", name, attribute)

        return self.field(attribute, options, reflection=reflection, **kwargs)

    def _render_error(self, attribute: str, render_options: RenderOptions) -> Optional[SafeString]:
        if self.record is None:
            return None
        component = self.wrapper(render_options.wrapper).find("error")
        wrap_with = component.wrap_with if component is not None else None
        return ErrorComposer(self.record, attribute, render_options).render(wrap_with)
