"""Documentation metadata resolution.

Each function reads one declaration and the project's settings and returns
a string or a boolean. Missing comments, tags, annotations or names never
raise; the chain simply moves on to the next source.
"""

from api_doc_meta.config import Settings
from api_doc_meta.resolver.chain import Source, always, first_non_blank, first_true
from api_doc_meta.source.annotation import (
    SWAGGER2_OPERATION_NAME,
    SWAGGER2_OPERATION_NOTES,
    SWAGGER2_PROPERTY_REQUIRED,
    SWAGGER3_OPERATION_DESCRIPTION,
    SWAGGER3_OPERATION_NAME,
    SWAGGER3_SCHEMA_REQUIRED,
    is_annotated_with,
)
from api_doc_meta.source.base import Declaration
from api_doc_meta.source.comment import body_text, has_tag, tag_value


def resolve_title(class_decl: Declaration, settings: Settings) -> str:
    """Title of a class: comment tag, then qualified name, then simple name."""
    return first_non_blank([
        Source("title comment tag", settings.title_use_comment_tag,
               lambda: tag_value(class_decl.doc_comment, settings.title_tag)),
        Source("qualified class name", settings.title_use_full_class_name,
               lambda: class_decl.qualified_name),
        Source("simple class name", settings.title_use_simple_class_name,
               lambda: class_decl.name),
    ])


def resolve_operation_name(method_decl: Declaration, settings: Settings) -> str:
    """Operation name; falls back to the method's own name, so never blank."""
    return first_non_blank([
        Source("swagger3 Operation.name", settings.name_use_swagger3,
               lambda: SWAGGER3_OPERATION_NAME.read(method_decl)),
        Source("swagger2 ApiOperation.value", settings.name_use_swagger2,
               lambda: SWAGGER2_OPERATION_NAME.read(method_decl)),
        Source("name comment tag", settings.name_use_comment_tag,
               lambda: tag_value(method_decl.doc_comment, settings.name_tag)),
    ], default=method_decl.name)


def resolve_method_description(method_decl: Declaration, settings: Settings) -> str:
    return first_non_blank([
        Source("swagger3 Operation.description", settings.desc_use_swagger3,
               lambda: SWAGGER3_OPERATION_DESCRIPTION.read(method_decl)),
        Source("swagger2 ApiOperation.notes", settings.desc_use_swagger2,
               lambda: SWAGGER2_OPERATION_NOTES.read(method_decl)),
        always("method comment", lambda: body_text(method_decl.doc_comment)),
    ])


def resolve_field_description(field_decl: Declaration, settings: Settings) -> str:
    """Field descriptions come from the doc comment only."""
    return body_text(field_decl.doc_comment)


def is_excluded_field(field_decl: Declaration, settings: Settings) -> bool:
    return first_true([
        always("excluded field name",
               lambda: field_decl.name in settings.exclude_field_names),
        always("static modifier", lambda: "static" in field_decl.modifiers),
        always("excluding annotation",
               lambda: is_annotated_with(field_decl, settings.exclude_field_annotations)),
    ])


def is_required_field(field_decl: Declaration, settings: Settings) -> bool:
    """Whether a field is required.

    With ``required_use_comment_tag`` on, a field carrying no doc comment at
    all counts as required; a commented field needs the required tag.
    """
    return first_true([
        always("required annotation",
               lambda: is_annotated_with(field_decl, settings.required_field_annotations)),
        always("swagger3 Schema.required",
               lambda: "true" in (SWAGGER3_SCHEMA_REQUIRED.read(field_decl) or "")),
        always("swagger2 ApiModelProperty.required",
               lambda: "true" in (SWAGGER2_PROPERTY_REQUIRED.read(field_decl) or "")),
        Source("required comment tag", settings.required_use_comment_tag,
               lambda: _required_by_comment(field_decl, settings)),
    ])


def is_required_parameter(param_decl: Declaration, settings: Settings) -> bool:
    # Parameters only honour the required annotations, unlike fields.
    return is_annotated_with(param_decl, settings.required_field_annotations)


def _required_by_comment(field_decl: Declaration, settings: Settings) -> bool:
    comment = field_decl.doc_comment
    if comment is None:
        return True
    return has_tag(comment, settings.required_tag)
