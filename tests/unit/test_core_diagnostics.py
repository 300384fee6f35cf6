import threading

import pytest

from gworkspace_schema.core.diagnostics import Diagnostic, Diagnostics, Severity, error, warning
from gworkspace_schema.core.paths import AttributePath


def test_diagnostic_serialization():
    diagnostic = error("invalid", "bad value", AttributePath.of("members").index(0).attribute("role"))
    assert diagnostic.is_error
    assert diagnostic.to_dict() == {
        "severity": "error",
        "summary": "invalid",
        "detail": "bad value",
        "path": "members[0].role",
    }
    assert str(diagnostic) == "ERROR (members[0].role): invalid: bad value"


def test_diagnostic_without_path():
    diagnostic = warning("heads up", "both set")
    assert diagnostic.severity is Severity.WARNING
    assert diagnostic.to_dict()["path"] is None
    assert str(diagnostic) == "WARNING: heads up: both set"


class TestCollector:
    def test_split_by_severity(self):
        diagnostics = Diagnostics()
        diagnostics.add_warning("w", "first")
        diagnostics.add_error("e", "second")
        assert diagnostics.has_error()
        assert [d.summary for d in diagnostics.errors()] == ["e"]
        assert [d.summary for d in diagnostics.warnings()] == ["w"]
        assert len(diagnostics) == 2

    def test_empty_collector_is_falsy(self):
        diagnostics = Diagnostics()
        assert not diagnostics
        assert not diagnostics.has_error()
        assert diagnostics == []

    def test_rejects_non_diagnostics(self):
        diagnostics = Diagnostics()
        with pytest.raises(TypeError):
            diagnostics.append("oops")
        with pytest.raises(TypeError):
            diagnostics.extend([error("e", "d"), "oops"])
        assert len(diagnostics) == 0

    def test_iteration_is_over_a_snapshot(self):
        diagnostics = Diagnostics([error("a", "1")])
        for _ in diagnostics:
            diagnostics.add_error("b", "2")
        assert len(diagnostics) == 2

    def test_concurrent_appends_are_all_kept(self):
        diagnostics = Diagnostics()

        def worker(n):
            for i in range(200):
                diagnostics.append(Diagnostic(Severity.ERROR, f"t{n}", str(i)))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(diagnostics) == 8 * 200
