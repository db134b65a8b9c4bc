"""Per-class aggregation of resolved metadata.

Produces the structure the documentation renderer consumes; rendering itself
happens elsewhere.
"""

from pydantic import BaseModel

from api_doc_meta.config import Settings
from api_doc_meta.resolver.metadata import (
    is_excluded_field,
    is_required_field,
    is_required_parameter,
    resolve_field_description,
    resolve_method_description,
    resolve_operation_name,
    resolve_title,
)
from api_doc_meta.source.base import Declaration, DeclarationKind


class ParamDoc(BaseModel):
    name: str
    required: bool


class FieldDoc(BaseModel):
    name: str
    description: str
    required: bool


class OperationDoc(BaseModel):
    method: str  # the method's own identifier
    name: str
    description: str
    parameters: list[ParamDoc] = []


class ClassDoc(BaseModel):
    """Resolved metadata for one class and its documented members."""

    title: str
    qualified_name: str | None
    operations: list[OperationDoc]
    fields: list[FieldDoc]


def describe_class(class_decl: Declaration, settings: Settings) -> ClassDoc:
    """Resolve every piece of metadata for a class, dropping excluded fields."""
    operations = [
        describe_operation(method, settings)
        for method in class_decl.members_of(DeclarationKind.METHOD)
    ]
    fields = [
        FieldDoc(
            name=field.name,
            description=resolve_field_description(field, settings),
            required=is_required_field(field, settings),
        )
        for field in class_decl.members_of(DeclarationKind.FIELD)
        if not is_excluded_field(field, settings)
    ]
    return ClassDoc(
        title=resolve_title(class_decl, settings),
        qualified_name=class_decl.qualified_name,
        operations=operations,
        fields=fields,
    )


def describe_operation(method_decl: Declaration, settings: Settings) -> OperationDoc:
    return OperationDoc(
        method=method_decl.name,
        name=resolve_operation_name(method_decl, settings),
        description=resolve_method_description(method_decl, settings),
        parameters=[
            ParamDoc(name=param.name, required=is_required_parameter(param, settings))
            for param in method_decl.members_of(DeclarationKind.PARAMETER)
        ],
    )
