"""
Django app configuration for the form_errors app.

This app renders validation errors of forms and model instances as HTML
elements, with configurable wrappers, prefixes and joining strategies.
"""

from django.apps import AppConfig


class FormErrorsConfig(AppConfig):
    """Configuration for the form_errors app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "form_errors"
    verbose_name = "Form Errors"
