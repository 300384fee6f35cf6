import pytest

from gworkspace_schema.core.values import INT64_MAX, AttributeValue, ValueKind, render, to_python


class TestConstructors:
    def test_null_is_shared(self):
        assert AttributeValue.null() is AttributeValue.null()
        assert AttributeValue.null().is_null

    @pytest.mark.parametrize(
        "builder, value",
        [
            (AttributeValue.boolean, 1),
            (AttributeValue.int64, True),
            (AttributeValue.int64, 1.5),
            (AttributeValue.float64, "1.0"),
            (AttributeValue.string, 3),
        ],
    )
    def test_wrong_payload_type_is_rejected(self, builder, value):
        with pytest.raises(TypeError):
            builder(value)

    def test_int64_range_enforced(self):
        assert AttributeValue.int64(INT64_MAX).as_int() == INT64_MAX
        with pytest.raises(TypeError, match="64-bit range"):
            AttributeValue.int64(INT64_MAX + 1)

    def test_float64_accepts_int(self):
        value = AttributeValue.float64(2)
        assert value.kind is ValueKind.FLOAT64
        assert value.as_float() == 2.0

    def test_set_deduplicates_keeping_first_seen_order(self):
        value = AttributeValue.set([AttributeValue.string(s) for s in ["b", "a", "b", "c", "a"]])
        assert [e.as_string() for e in value.elements()] == ["b", "a", "c"]

    def test_collections_require_attribute_values(self):
        with pytest.raises(TypeError):
            AttributeValue.list(["plain"])
        with pytest.raises(TypeError):
            AttributeValue.map({"k": "plain"})


class TestOf:
    def test_infers_kinds(self):
        assert AttributeValue.of(None).is_null
        assert AttributeValue.of(True).kind is ValueKind.BOOL
        assert AttributeValue.of(3).kind is ValueKind.INT64
        assert AttributeValue.of(3.5).kind is ValueKind.FLOAT64
        assert AttributeValue.of("x").kind is ValueKind.STRING
        assert AttributeValue.of([1, 2]).kind is ValueKind.LIST
        assert AttributeValue.of({"a"}).kind is ValueKind.SET
        assert AttributeValue.of({"k": 1}).kind is ValueKind.MAP

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="unsupported attribute value type"):
            AttributeValue.of(object())


class TestAccessors:
    def test_accessor_checks_tag(self):
        with pytest.raises(TypeError, match="string value expected, got int64"):
            AttributeValue.int64(1).as_string()

    def test_field_of_absent_key_is_null(self):
        record = AttributeValue.object({"name": AttributeValue.string("eng")})
        assert record.field("name").as_string() == "eng"
        assert record.field("missing").is_null

    def test_elements_requires_collection(self):
        with pytest.raises(TypeError):
            AttributeValue.string("x").elements()


def test_render_and_to_python():
    record = AttributeValue.object({
        "name": AttributeValue.string("eng"),
        "archived": AttributeValue.boolean(False),
        "aliases": AttributeValue.list([AttributeValue.string("a@example.com")]),
        "parent": AttributeValue.null(),
    })
    assert render(record) == "{name: eng, archived: false, aliases: [a@example.com], parent: null}"
    assert to_python(record) == {
        "name": "eng",
        "archived": False,
        "aliases": ["a@example.com"],
        "parent": None,
    }


class TestSetPositions:
    def test_indexed_elements_use_first_occurrence(self):
        value = AttributeValue.set([AttributeValue.string(s) for s in ["a", "a", "b", "a", "c"]])
        assert [(i, e.as_string()) for i, e in value.indexed_elements()] == [(0, "a"), (2, "b"), (4, "c")]

    def test_element_at_follows_input_positions(self):
        value = AttributeValue.set([AttributeValue.string(s) for s in ["a", "a", "b"]])
        assert value.element_at(1).as_string() == "a"
        assert value.element_at(2).as_string() == "b"
        assert value.element_at(3).is_null

    def test_positions_do_not_affect_equality(self):
        with_duplicates = AttributeValue.set([AttributeValue.string(s) for s in ["a", "a", "b"]])
        plain = AttributeValue.set([AttributeValue.string(s) for s in ["a", "b"]])
        assert with_duplicates == plain
        assert hash(with_duplicates) == hash(plain)

    def test_list_positions_are_plain_indices(self):
        value = AttributeValue.list([AttributeValue.string(s) for s in ["a", "a"]])
        assert [i for i, _ in value.indexed_elements()] == [0, 1]
