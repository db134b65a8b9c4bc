from api_doc_meta.config import Settings
from api_doc_meta.resolver.document import describe_class, describe_operation
from api_doc_meta.source.annotation import API_OPERATION
from api_doc_meta.source.base import Annotation, Declaration, DocComment


def _controller() -> Declaration:
    return Declaration(
        kind="class",
        name="UserController",
        qualified_name="com.acme.UserController",
        members=[
            Declaration(
                kind="method",
                name="createUser",
                annotations=[Annotation(qualified_name=API_OPERATION, attributes={"value": "Create user"})],
                members=[
                    Declaration(
                        kind="parameter",
                        name="request",
                        annotations=[Annotation(qualified_name="javax.validation.constraints.NotNull")],
                    ),
                    Declaration(kind="parameter", name="dryRun"),
                ],
            ),
            Declaration(kind="field", name="serialVersionUID", modifiers={"static", "final"}),
            Declaration(kind="field", name="name", doc_comment=DocComment(body="Display name")),
        ],
    )


class TestDescribeClass:
    def test_collects_operations_and_fields(self):
        doc = describe_class(_controller(), Settings())
        assert doc.title == "UserController"
        assert doc.qualified_name == "com.acme.UserController"
        assert [op.name for op in doc.operations] == ["Create user"]
        assert [f.name for f in doc.fields] == ["name"]

    def test_field_metadata(self):
        doc = describe_class(_controller(), Settings())
        field = doc.fields[0]
        assert field.description == "Display name"
        assert field.required is False

    def test_settings_change_title(self):
        doc = describe_class(_controller(), Settings(title_use_full_class_name=True))
        assert doc.title == "com.acme.UserController"


class TestDescribeOperation:
    def test_parameters_required_flags(self):
        method = _controller().members[0]
        op = describe_operation(method, Settings())
        assert op.method == "createUser"
        assert op.description == ""
        assert [(p.name, p.required) for p in op.parameters] == [("request", True), ("dryRun", False)]
