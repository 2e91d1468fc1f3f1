"""
Render form field validation errors as HTML.

Basic usage:
    >>> from form_errors import FormBuilder
    >>> builder = FormBuilder(ErrorMapRecord({"name": ["can't be blank"]}))
    >>> builder.error("name")
    '<span class="error">can&#x27;t be blank</span>'
"""

__version__ = "0.1.0"

VERSION = (0, 1, 0)

from form_errors.builder import FormBuilder  # noqa: E402
from form_errors.composer import ErrorComposer  # noqa: E402
from form_errors.options import RenderOptions  # noqa: E402
from form_errors.records import (  # noqa: E402
    ErrorMapRecord,
    FormRecord,
    ModelRecord,
    Record,
    as_record,
)
from form_errors.reflection import Reflection, reflection_for  # noqa: E402

__all__ = [
    "__version__",
    "VERSION",
    "ErrorComposer",
    "ErrorMapRecord",
    "FormBuilder",
    "FormRecord",
    "ModelRecord",
    "Record",
    "Reflection",
    "RenderOptions",
    "as_record",
    "reflection_for",
]
