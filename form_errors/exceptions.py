"""Exceptions raised by the form_errors app."""

from django.core.exceptions import ImproperlyConfigured


class FormErrorsConfigurationError(ImproperlyConfigured):
    """Raised when ``FORM_ERRORS`` settings or render options are invalid."""
