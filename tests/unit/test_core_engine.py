import pytest

from gworkspace_schema.core.diagnostics import Diagnostics, error, warning
from gworkspace_schema.core.engine import ensure_valid, validate_config, validate_record
from gworkspace_schema.core.exceptions import ConfigValidationError
from gworkspace_schema.core.schema import (
    Block,
    ListNested,
    MapOf,
    ResourceSchema,
    SetNested,
    SetOf,
    SingleNested,
    String,
)
from gworkspace_schema.core.validators import (
    SENSITIVE_PLACEHOLDER,
    ExactlyOneOf,
    StringInSlice,
    StringIsJson,
    StringLenBetween,
)
from gworkspace_schema.core.values import AttributeValue, ValueKind

ROLES = StringInSlice(["MANAGER", "MEMBER", "OWNER"])


@pytest.fixture
def schema():
    return ResourceSchema("googleworkspace_test", "", Block(
        [
            String("primary_email", required=True, validators=[StringLenBetween(3, 64)]),
            String("password", optional=True, sensitive=True, validators=[StringLenBetween(8, 100)]),
            String("hash_function", optional=True, validators=[StringInSlice(["MD5", "SHA-1", "crypt"])]),
            SetOf("roles", ValueKind.STRING, optional=True, validators=[ROLES]),
            MapOf("schema_values", ValueKind.STRING, optional=True, validators=[StringIsJson()]),
            SingleNested("name", [
                String("family_name", required=True, validators=[StringLenBetween(1, 60)]),
            ], optional=True),
            ListNested("members", [
                String("email", required=True),
                String("role", optional=True, validators=[ROLES]),
            ], optional=True),
        ],
        validators=[ExactlyOneOf(["password", "hash_function"])],
    ))


def paths(diagnostics):
    return [str(d.path) for d in diagnostics]


class TestValidateConfig:
    def test_valid_config(self, schema):
        diagnostics = validate_config(schema, {"primary_email": "ada@example.com", "password": "s3cret-pass"})
        assert list(diagnostics) == []

    def test_record_rules_run_before_attributes(self, schema):
        diagnostics = validate_config(schema, {"primary_email": "a", "hash_function": "SHA-256"})
        assert [d.summary for d in diagnostics] == [
            "length of string is not long enough",
            "string value is not a valid option",
        ]
        diagnostics = validate_config(schema, {
            "primary_email": "a", "password": "s3cret-pass", "hash_function": "MD5",
        })
        assert [d.summary for d in diagnostics] == [
            "invalid attribute combination",
            "length of string is not long enough",
        ]

    def test_decode_diagnostics_come_first(self, schema):
        diagnostics = validate_config(schema, {"password": "short", "unknown": True})
        assert [d.summary for d in diagnostics] == [
            "unsupported argument",
            "missing required argument",
            "length of string is not long enough",
        ]

    def test_nested_and_collection_paths(self, schema):
        diagnostics = validate_config(schema, {
            "primary_email": "ada@example.com",
            "password": "s3cret-pass",
            "roles": ["MEMBER", "ADMIN"],
            "schema_values": {"ok": "1", "bad": "{"},
            "name": {"family_name": ""},
            "members": [{"email": "a@example.com", "role": "OWNER"}, {"email": "b@example.com", "role": "BOSS"}],
        })
        assert paths(diagnostics) == [
            "roles[1]",
            'schema_values["bad"]',
            "name.family_name",
            "members[1].role",
        ]

    def test_sensitive_value_never_appears(self, schema):
        diagnostics = validate_config(schema, {"primary_email": "ada@example.com", "password": "hunter2"})
        assert len(diagnostics) == 1
        assert "hunter2" not in diagnostics.errors()[0].detail
        assert SENSITIVE_PLACEHOLDER in diagnostics.errors()[0].detail

    def test_sensitivity_propagates_to_nested_attributes(self):
        schema = ResourceSchema("googleworkspace_test", "", Block([
            SingleNested("smtp_msa", [
                String("username", required=True, validators=[StringLenBetween(3, 10)]),
            ], optional=True, sensitive=True),
        ]))
        diagnostics = validate_config(schema, {"smtp_msa": {"username": "mailer-account-name"}})
        assert "mailer-account-name" not in diagnostics.errors()[0].detail

    def test_parallel_output_equals_sequential(self, schema):
        raw = {
            "primary_email": "a",
            "password": "short",
            "hash_function": "MD4",
            "roles": ["X", "Y"],
            "schema_values": {"a": "{", "b": "["},
            "name": {"family_name": ""},
            "members": [{"email": "a@example.com", "role": "Z"}],
        }
        sequential = validate_config(schema, raw)
        for workers in (2, 4, 8):
            assert validate_config(schema, raw, max_workers=workers) == sequential.snapshot()

    def test_repeated_runs_are_identical(self, schema):
        raw = {"primary_email": "a", "roles": ["X"]}
        assert validate_config(schema, raw) == validate_config(schema, raw).snapshot()


class TestValidateRecord:
    def test_null_record(self, schema):
        assert list(validate_record(schema, AttributeValue.null())) == []

    def test_non_object_record(self, schema):
        diagnostics = validate_record(schema, AttributeValue.string("x"))
        assert [d.summary for d in diagnostics] == ["incorrect attribute value type"]

    def test_wrong_kind_inside_record(self, schema):
        record = AttributeValue.object({
            "primary_email": AttributeValue.string("ada@example.com"),
            "password": AttributeValue.string("s3cret-pass"),
            "members": AttributeValue.string("not a list"),
        })
        diagnostics = validate_record(schema, record)
        assert [d.summary for d in diagnostics] == ["incorrect attribute value type"]
        assert paths(diagnostics) == ["members"]


class TestEnsureValid:
    def test_returns_warnings(self):
        diagnostics = Diagnostics([warning("conflicting settings", "both set")])
        assert [d.summary for d in ensure_valid(diagnostics)] == ["conflicting settings"]

    def test_raises_on_error(self):
        diagnostics = Diagnostics([warning("w", "x"), error("bad", "value")])
        with pytest.raises(ConfigValidationError, match=r"configuration has 1 error\(s\): ERROR: bad: value") as exc:
            ensure_valid(diagnostics)
        assert exc.value.diagnostics is diagnostics


class TestSetPositions:
    @pytest.fixture
    def members_schema(self):
        return ResourceSchema("googleworkspace_test", "", Block([
            SetNested("members", [
                String("email", required=True),
                String("role", optional=True, validators=[ROLES]),
                String("type", optional=True),
            ], optional=True),
            SetOf("roles", ValueKind.STRING, optional=True, validators=[ROLES]),
        ]))

    def test_duplicate_elements_keep_input_positions(self, members_schema):
        diagnostics = validate_config(members_schema, {"members": [
            {"email": "a@example.com"},
            {"email": "a@example.com"},
            {"email": "b@example.com", "role": "BOSS", "type": 5},
        ]})
        assert [(d.summary, str(d.path)) for d in diagnostics] == [
            ("incorrect attribute value type", "members[2].type"),
            ("string value is not a valid option", "members[2].role"),
        ]

    def test_duplicate_primitive_elements(self, members_schema):
        diagnostics = validate_config(members_schema, {"roles": ["MEMBER", "MEMBER", "ADMIN", "ADMIN"]})
        assert paths(diagnostics) == ["roles[2]"]

    def test_positions_survive_parallel_evaluation(self, members_schema):
        raw = {"members": [{"email": "a"}, {"email": "a"}, {"email": "b", "role": "X"}], "roles": ["X", "X", "Y"]}
        sequential = validate_config(members_schema, raw)
        assert validate_config(members_schema, raw, max_workers=4) == sequential.snapshot()
        assert paths(sequential) == ["members[2].role", "roles[0]", "roles[2]"]
