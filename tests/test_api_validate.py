"""Tests for the dry-run validation endpoint."""
import pytest

from gworkspace_schema.flask_app import create_app

ORG_UNIT_YAML = """\
name: sales
parent_org_unit_path: /
parent_org_unit_id: id:03ph8a2z
"""


def test_valid_json_config(client):
    response = client.post("/validate/googleworkspace_group", json={"email": "eng@example.com"})
    assert response.status_code == 200
    assert response.get_json() == {
        "resource_type": "googleworkspace_group",
        "valid": True,
        "diagnostics": [],
    }


def test_invalid_config_is_still_200(client):
    response = client.post(
        "/validate/googleworkspace_group_member",
        json={"group_id": "eng@example.com", "email": "ada@example.com", "role": "ADMIN"},
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["valid"] is False
    assert body["diagnostics"] == [{
        "severity": "error",
        "summary": "string value is not a valid option",
        "detail": "role (ADMIN) must be one of [MANAGER, MEMBER, OWNER]",
        "path": "role",
    }]


@pytest.mark.parametrize("content_type", ["application/yaml", "text/yaml", "application/x-yaml"])
def test_yaml_body(client, content_type):
    response = client.post("/validate/googleworkspace_org_unit", data=ORG_UNIT_YAML, content_type=content_type)
    assert response.status_code == 200
    body = response.get_json()
    assert [d["summary"] for d in body["diagnostics"]] == ["invalid attribute combination"]
    assert body["diagnostics"][0]["path"] == "parent_org_unit_id"


def test_password_is_never_echoed(client):
    response = client.post("/validate/googleworkspace_user", json={
        "primary_email": "ada@example.com",
        "name": {"family_name": "Lovelace"},
        "password": "hunter2",
    })
    assert response.get_json()["valid"] is False
    assert b"hunter2" not in response.data


def test_diagnostic_order_with_workers(registry, make_config):
    body = {
        "primary_email": "ada@example.com",
        "name": {"family_name": ""},
        "password": "short",
        "phones": [{"value": "1", "type": "beeper"}],
        "custom_schemas": [{"schema_name": "s", "schema_values": {"a": "{"}}],
    }
    sequential = create_app(registry=registry, config=make_config(max_workers=1)).test_client()
    parallel = create_app(registry=registry, config=make_config(max_workers=4)).test_client()
    first = sequential.post("/validate/googleworkspace_user", json=body).get_json()
    second = parallel.post("/validate/googleworkspace_user", json=body).get_json()
    assert first == second
    assert [d["path"] for d in first["diagnostics"]] == [
        "password",
        "name.family_name",
        "phones[0].type",
        'custom_schemas[0].schema_values["a"]',
    ]


class TestBadRequests:
    def test_unknown_type(self, client):
        response = client.post("/validate/googleworkspace_nope", json={})
        assert response.status_code == 404
        assert response.get_json()["message"] == "Unknown resource type: googleworkspace_nope"

    def test_empty_body(self, client):
        response = client.post("/validate/googleworkspace_group", data="", content_type="application/json")
        assert response.status_code == 400
        assert response.get_json() == {"error": "Bad Request", "message": "Request body is empty"}

    def test_invalid_json(self, client):
        response = client.post("/validate/googleworkspace_group", data="{", content_type="application/json")
        assert response.status_code == 400
        assert response.get_json()["message"].startswith("Invalid JSON body")

    def test_invalid_yaml(self, client):
        response = client.post(
            "/validate/googleworkspace_group", data="email: [unclosed", content_type="application/yaml"
        )
        assert response.status_code == 400
        assert response.get_json()["message"].startswith("Invalid YAML body")

    def test_non_object_body_is_a_diagnostic(self, client):
        response = client.post("/validate/googleworkspace_group", json=["eng@example.com"])
        assert response.status_code == 200
        assert response.get_json()["diagnostics"][0]["summary"] == "incorrect attribute value type"

    def test_get_not_allowed(self, client):
        response = client.get("/validate/googleworkspace_group")
        assert response.status_code == 405
        assert response.get_json()["error"] == "Method Not Allowed"

    @pytest.mark.parametrize("content_type, prefix", [
        ("application/json", "Invalid JSON body"),
        ("application/yaml", "Invalid YAML body"),
    ])
    def test_deeply_nested_body(self, client, content_type, prefix):
        depth = 100000
        response = client.post(
            "/validate/googleworkspace_group", data="[" * depth + "]" * depth, content_type=content_type
        )
        assert response.status_code == 400
        assert response.get_json() == {"error": "Bad Request", "message": f"{prefix}: nesting too deep"}
