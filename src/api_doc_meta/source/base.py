"""Unified declaration models.

The syntax-tree provider (or a declaration dump) is converted into these
models before any metadata is resolved from them.
"""

from enum import Enum

from pydantic import BaseModel, field_validator

AttributeValue = str | bool | int | float


class DeclarationKind(str, Enum):
    CLASS = "class"
    METHOD = "method"
    FIELD = "field"
    PARAMETER = "parameter"


class Annotation(BaseModel):
    """A source-language annotation attached to a declaration."""

    qualified_name: str  # io.swagger.annotations.ApiOperation
    attributes: dict[str, AttributeValue | list[AttributeValue]] = {}  # arrays: tags={...}


class DocComment(BaseModel):
    """A structured doc comment: free-text body plus name/value tags."""

    body: str = ""
    tags: dict[str, str] = {}  # a present tag may have a blank value


class Declaration(BaseModel):
    """A class, method, field or parameter exposed by the syntax tree."""

    kind: DeclarationKind
    name: str
    qualified_name: str | None = None  # classes only, None for anonymous/local
    modifiers: set[str] = set()
    annotations: list[Annotation] = []
    doc_comment: DocComment | None = None
    project: str | None = None
    members: list["Declaration"] = []

    @field_validator("doc_comment", mode="before")
    @classmethod
    def parse_raw_comment(cls, value):
        if isinstance(value, str):
            from api_doc_meta.source.comment import parse_doc_comment
            return parse_doc_comment(value)
        return value

    def members_of(self, kind: DeclarationKind) -> list["Declaration"]:
        return [m for m in self.members if m.kind == kind]
