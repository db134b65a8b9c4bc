"""Annotation lookups by qualified name.

Swagger annotations are read as documentation sources. Each attribute the
resolver needs is named once in the table below, so supporting another
annotation schema means adding an ``AttributeRef``.
"""

from typing import Iterable, NamedTuple

from api_doc_meta.source.base import Annotation, AttributeValue, Declaration

# Swagger v2
API_OPERATION = "io.swagger.annotations.ApiOperation"
API_MODEL_PROPERTY = "io.swagger.annotations.ApiModelProperty"

# Swagger v3
OPERATION = "io.swagger.v3.oas.annotations.Operation"
SCHEMA = "io.swagger.v3.oas.annotations.media.Schema"


def find_annotation(declaration: Declaration, annotation_id: str) -> Annotation | None:
    """Return the first annotation on ``declaration`` matching ``annotation_id``."""
    for annotation in declaration.annotations:
        if annotation.qualified_name == annotation_id:
            return annotation
    return None


def attribute(declaration: Declaration, annotation_id: str, attribute_name: str) -> str | None:
    """Return the literal text of an annotation attribute, or None if unset."""
    annotation = find_annotation(declaration, annotation_id)
    if annotation is None or attribute_name not in annotation.attributes:
        return None
    return _literal_text(annotation.attributes[attribute_name])


def is_annotated_with(declaration: Declaration, annotation_ids: Iterable[str]) -> bool:
    ids = set(annotation_ids)
    return any(a.qualified_name in ids for a in declaration.annotations)


def _literal_text(value: AttributeValue | list[AttributeValue]) -> str:
    if isinstance(value, list):
        return "{" + ", ".join(_literal_text(v) for v in value) + "}"
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value)
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


class AttributeRef(NamedTuple):
    """A fixed (annotation, attribute) pair the resolver reads."""

    annotation_id: str
    attribute: str

    def read(self, declaration: Declaration) -> str | None:
        return attribute(declaration, self.annotation_id, self.attribute)


SWAGGER3_OPERATION_NAME = AttributeRef(OPERATION, "name")
SWAGGER3_OPERATION_DESCRIPTION = AttributeRef(OPERATION, "description")
SWAGGER3_SCHEMA_REQUIRED = AttributeRef(SCHEMA, "required")

SWAGGER2_OPERATION_NAME = AttributeRef(API_OPERATION, "value")
SWAGGER2_OPERATION_NOTES = AttributeRef(API_OPERATION, "notes")
SWAGGER2_PROPERTY_REQUIRED = AttributeRef(API_MODEL_PROPERTY, "required")
