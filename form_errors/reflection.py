"""
Association metadata used for association-level error lookup.

A ``Reflection`` names the related model and the association through which
it is reached. Errors stored under the association name (``company``) are
rendered together with errors on the column (``company_id``).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type

from django.db import models


@dataclass(frozen=True)
class Reflection:
    """
    An association between a record attribute and another model.

    Attributes:
        model: The related model class
        name: Association name, used as the secondary error key
        options: Free-form association options

    Examples:
        >>> Reflection(Company, "company").name
        'company'
    """

    model: Optional[Type[Any]]
    name: str
    options: Dict[str, Any] = field(default_factory=dict, compare=False)


def reflection_for(model: Type[models.Model], name: str) -> Optional[Reflection]:
    """
    Build the reflection for a model relation.

    ``name`` may be either the relation name (``company``) or its column
    (``company_id``). Returns ``None`` for fields that are not single-valued
    relations.

    Raises:
        FieldDoesNotExist: If the model has no such field.
    """
    opts = model._meta
    model_field = None
    for candidate in opts.concrete_fields:
        if candidate.attname == name:
            model_field = candidate
            break
    if model_field is None:
        model_field = opts.get_field(name)

    if not (model_field.is_relation and (model_field.many_to_one or model_field.one_to_one)):
        return None

    return Reflection(
        model=model_field.related_model,
        name=model_field.name,
        options={"attname": getattr(model_field, "attname", model_field.name)},
    )
