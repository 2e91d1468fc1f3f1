"""
Template tags for rendering form errors.

Usage:
    {% load form_error_tags %}
    {% form_error form "name" %}
    {% form_error form "age" error_method="to_sentence" class="inline" %}
    {% form_full_error form "name" id="name_error" %}
    {% form_field form "email" hint="We never share it" %}
"""

from django import template

from form_errors.builder import FormBuilder

register = template.Library()


@register.simple_tag
def form_error(obj, attribute, **options):
    """Render the error element for one attribute, or nothing."""
    return FormBuilder(obj).error(attribute, options) or ""


@register.simple_tag
def form_full_error(obj, attribute, **options):
    """Render the error element for one attribute prefixed with its label."""
    return FormBuilder(obj).full_error(attribute, options) or ""


@register.simple_tag
def form_field(obj, attribute, **options):
    """Render one attribute inside its wrapper."""
    wrapper = options.pop("wrapper", None)
    return FormBuilder(obj, wrapper=wrapper).field(attribute, options)


@register.filter
def has_errors(obj, attribute):
    """Return True when the attribute has errors: ``{% if form|has_errors:"name" %}``."""
    record = FormBuilder(obj).record
    return bool(record and record.has_errors(attribute))
