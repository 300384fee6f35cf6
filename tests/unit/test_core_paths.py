import pytest

from gworkspace_schema.core.paths import AttributePath
from gworkspace_schema.core.values import AttributeValue


def test_rendering():
    assert str(AttributePath.root()) == "<root>"
    assert str(AttributePath.of("members").index(0).attribute("role")) == "members[0].role"
    assert (
        str(AttributePath.of("custom_schemas").index(1).attribute("schema_values").key("dept"))
        == 'custom_schemas[1].schema_values["dept"]'
    )


def test_paths_are_immutable_values():
    base = AttributePath.of("name")
    child = base.attribute("family_name")
    assert str(base) == "name"
    assert child.parent == base
    assert child.last_name == "family_name"
    assert AttributePath.of("a", "b") == AttributePath.root().attribute("a").attribute("b")
    assert AttributePath.root().is_root


class TestResolve:
    @pytest.fixture
    def record(self):
        return AttributeValue.object({
            "members": AttributeValue.list([
                AttributeValue.object({"role": AttributeValue.string("OWNER")}),
            ]),
            "labels": AttributeValue.map({"team": AttributeValue.string("it")}),
            "parent": AttributeValue.null(),
        })

    def test_resolves_nested_values(self, record):
        assert AttributePath.of("members").index(0).attribute("role").resolve(record).as_string() == "OWNER"
        assert AttributePath.of("labels").key("team").resolve(record).as_string() == "it"

    def test_missing_steps_resolve_to_null(self, record):
        assert AttributePath.of("members").index(5).resolve(record).is_null
        assert AttributePath.of("parent").attribute("id").resolve(record).is_null
        assert AttributePath.of("nope").resolve(record).is_null

    def test_wrong_step_kind_raises(self, record):
        with pytest.raises(TypeError):
            AttributePath.of("members").attribute("role").resolve(record)


def test_set_index_resolves_by_input_position():
    record = AttributeValue.object({
        "roles": AttributeValue.set([AttributeValue.string(s) for s in ["MEMBER", "MEMBER", "OWNER"]]),
    })
    assert AttributePath.of("roles").index(2).resolve(record).as_string() == "OWNER"
