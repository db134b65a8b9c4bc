from api_doc_meta.source.annotation import (
    API_OPERATION,
    OPERATION,
    SWAGGER2_OPERATION_NAME,
    SWAGGER3_OPERATION_NAME,
    attribute,
    find_annotation,
    is_annotated_with,
)
from api_doc_meta.source.base import Annotation, Declaration


def _method(*annotations: Annotation) -> Declaration:
    return Declaration(kind="method", name="create", annotations=list(annotations))


class TestAttribute:
    def test_absent_annotation(self):
        assert attribute(_method(), API_OPERATION, "value") is None

    def test_absent_attribute(self):
        d = _method(Annotation(qualified_name=API_OPERATION, attributes={"notes": "n"}))
        assert attribute(d, API_OPERATION, "value") is None

    def test_quoted_literal_is_unquoted(self):
        d = _method(Annotation(qualified_name=API_OPERATION, attributes={"value": '"Create user"'}))
        assert attribute(d, API_OPERATION, "value") == "Create user"

    def test_plain_text_returned_as_is(self):
        d = _method(Annotation(qualified_name=API_OPERATION, attributes={"value": "Create user"}))
        assert attribute(d, API_OPERATION, "value") == "Create user"

    def test_array_rendered_as_braced_list(self):
        d = _method(Annotation(qualified_name=API_OPERATION, attributes={"tags": ['"users"', "admin", True]}))
        assert attribute(d, API_OPERATION, "tags") == "{users, admin, true}"

    def test_boolean_rendered_as_literal(self):
        d = _method(Annotation(qualified_name=API_OPERATION, attributes={"hidden": True}))
        assert attribute(d, API_OPERATION, "hidden") == "true"

    def test_first_matching_annotation_is_used(self):
        d = _method(
            Annotation(qualified_name=OPERATION, attributes={"name": "first"}),
            Annotation(qualified_name=OPERATION, attributes={"name": "second"}),
        )
        assert find_annotation(d, OPERATION).attributes["name"] == "first"
        assert attribute(d, OPERATION, "name") == "first"


class TestIsAnnotatedWith:
    def test_any_identifier_matches(self):
        d = _method(Annotation(qualified_name="javax.validation.constraints.NotNull"))
        assert is_annotated_with(d, {"javax.validation.constraints.NotBlank", "javax.validation.constraints.NotNull"})

    def test_no_match(self):
        d = _method(Annotation(qualified_name="lombok.Data"))
        assert is_annotated_with(d, {"javax.validation.constraints.NotNull"}) is False

    def test_empty_set(self):
        d = _method(Annotation(qualified_name="lombok.Data"))
        assert is_annotated_with(d, set()) is False


class TestAttributeRef:
    def test_refs_read_their_attribute(self):
        d = _method(
            Annotation(qualified_name=OPERATION, attributes={"name": "v3 name"}),
            Annotation(qualified_name=API_OPERATION, attributes={"value": "v2 name"}),
        )
        assert SWAGGER3_OPERATION_NAME.read(d) == "v3 name"
        assert SWAGGER2_OPERATION_NAME.read(d) == "v2 name"
