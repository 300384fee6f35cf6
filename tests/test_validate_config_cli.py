import json

import pytest

import scripts.validate_config as validate_config

WORKSPACE_YAML = """\
googleworkspace_group:
  - email: eng@example.com
  - email: ops@example.com
    aliases: [ops-team@example.com]
googleworkspace_org_unit:
  name: sales
  parent_org_unit_path: /
"""

INVALID_YAML = """\
googleworkspace_group_member:
  group_id: eng@example.com
  email: ada@example.com
  role: ADMIN
googleworkspace_org_unit:
  name: sales
"""


@pytest.fixture
def write(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


class TestValidate:
    def test_valid_file(self, write, capsys):
        assert validate_config.main(["validate", write("ok.yaml", WORKSPACE_YAML)]) == 0
        out = capsys.readouterr().out
        assert out.strip() == "3 configuration(s) checked: 0 error(s), 0 warning(s)"

    def test_invalid_file(self, write, capsys):
        assert validate_config.main(["validate", write("bad.yaml", INVALID_YAML)]) == 1
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("googleworkspace_group_member[0]: ERROR (role): string value is not a valid option")
        assert lines[1].startswith("googleworkspace_org_unit[0]: ERROR (parent_org_unit_id): invalid attribute combination")
        assert lines[-1] == "2 configuration(s) checked: 2 error(s), 0 warning(s)"

    def test_explicit_type_with_json(self, write, capsys):
        path = write("users.json", json.dumps([
            {"primary_email": "ada@example.com", "name": {"family_name": "Lovelace"}},
            {"primary_email": "bob@example.com"},
        ]))
        code = validate_config.main(["validate", path, "--type", "googleworkspace_user", "--format", "json"])
        assert code == 1
        results = json.loads(capsys.readouterr().out)
        assert [r["valid"] for r in results] == [True, False]
        assert results[1]["diagnostics"][0]["summary"] == "missing required argument"
        assert "planned" not in results[0]

    def test_plan_applies_defaults(self, write, capsys):
        path = write("member.yaml", "group_id: eng@example.com\nemail: ada@example.com\n")
        code = validate_config.main([
            "validate", path, "--type", "googleworkspace_group_member", "--plan", "--format", "json",
        ])
        assert code == 0
        planned = json.loads(capsys.readouterr().out)[0]["planned"]
        assert planned["role"] == "MEMBER"
        assert planned["type"] == "USER"
        assert planned["delivery_settings"] == "ALL_MAIL"

    def test_workers_do_not_change_output(self, write, capsys):
        path = write("bad.yaml", INVALID_YAML)
        validate_config.main(["validate", path])
        sequential = capsys.readouterr().out
        validate_config.main(["validate", path, "--workers", "4"])
        assert capsys.readouterr().out == sequential

    def test_unknown_type(self, write, capsys):
        assert validate_config.main(["validate", write("x.yaml", "googleworkspace_nope: {}\n")]) == 1
        assert "Unknown resource type: googleworkspace_nope" in capsys.readouterr().err

    @pytest.mark.parametrize("text", ["key: [unclosed", "- just\n- a list\n"])
    def test_unloadable_file(self, write, capsys, text):
        assert validate_config.main(["validate", write("broken.yaml", text)]) == 2
        assert "cannot load" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert validate_config.main(["validate", str(tmp_path / "missing.yaml")]) == 2

    def test_workers_must_be_positive(self, write):
        with pytest.raises(SystemExit):
            validate_config.main(["validate", write("ok.yaml", WORKSPACE_YAML), "--workers", "0"])


class TestOtherCommands:
    def test_list_types(self, capsys):
        assert validate_config.main(["list-types"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 13
        assert lines[0].startswith("googleworkspace_chrome_policy\t")

    def test_docs(self, capsys):
        assert validate_config.main(["docs", "googleworkspace_group"]) == 0
        assert capsys.readouterr().out.startswith("# googleworkspace_group (Resource)")

    def test_docs_unknown_type(self, capsys):
        assert validate_config.main(["docs", "googleworkspace_nope"]) == 1

    def test_provider_without_customer(self, capsys):
        assert validate_config.main(["provider"]) == 1
        assert "customer_id is required" in capsys.readouterr().out

    def test_provider_ok(self, monkeypatch, capsys):
        monkeypatch.setenv("GOOGLEWORKSPACE_CUSTOMER_ID", "C0123abcd")
        assert validate_config.main(["provider"]) == 0
        assert "provider configuration ok" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert validate_config.main([]) == 0
        assert "usage:" in capsys.readouterr().out

    def test_log_level_is_case_insensitive(self, capsys):
        assert validate_config.main(["--log-level", "debug", "list-types"]) == 0

    def test_unknown_log_level(self, capsys):
        with pytest.raises(SystemExit) as exc:
            validate_config.main(["--log-level", "verbose", "list-types"])
        assert exc.value.code == 2
        assert "unknown log level: verbose" in capsys.readouterr().err
