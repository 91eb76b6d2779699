"""Tests for reconciling source signatures with existing test files."""

from pathlib import Path

import pytest

from go_test_scaffolder.errors import ParseError
from go_test_scaffolder.models import FunctionSignature, SourceUnit
from go_test_scaffolder.reconciler import (
    APPEND,
    FRESH,
    artifact_path_for,
    existing_stub_names,
    reconcile,
    stub_name,
)

EXISTING_TEST_FILE = """package calc

import "testing"

func Test_calc_Add(t *testing.T) {
  tests := []struct {
    name string
    input0 int
    input1 int
    expected0 int
  }{}
}

func helper() {}
"""


def _unit(tmp_path, *names):
    return SourceUnit(
        directory_path=tmp_path,
        file_name="math.go",
        package_name="calc",
        signatures=[FunctionSignature(name=name) for name in names],
    )


class TestStubName:
    def test_combines_package_and_function(self):
        assert stub_name("calc", "Add") == "Test_calc_Add"

    def test_is_deterministic(self):
        assert stub_name("util", "Trim") == stub_name("util", "Trim")


class TestArtifactPathFor:
    def test_inserts_suffix_before_extension(self):
        assert artifact_path_for(Path("pkg/math.go")) == Path("pkg/math_test.go")

    def test_only_last_extension_is_replaced(self):
        assert artifact_path_for(Path("a/b.c.go")) == Path("a/b.c_test.go")

    def test_custom_suffix(self):
        assert artifact_path_for(Path("math.go"), "_gen_test") == Path(
            "math_gen_test.go"
        )


class TestReconcile:
    """Tests for reconcile function."""

    def given_existing_test_file(self, tmp_path):
        self.artifact = tmp_path / "math_test.go"
        self.artifact.write_text(EXISTING_TEST_FILE)

    def when_reconciled(self, unit, tmp_path):
        self.result = reconcile(unit, tmp_path / "math_test.go")

    def test_fresh_when_artifact_missing(self, tmp_path):
        """Without a test file every signature is new."""
        unit = _unit(tmp_path, "Add", "Sub")
        self.when_reconciled(unit, tmp_path)

        assert self.result.mode == FRESH
        assert [s.name for s in self.result.signatures] == ["Add", "Sub"]
        assert self.result.unit is unit

    def test_append_drops_existing_stubs(self, tmp_path):
        """Signatures that already have a stub are not regenerated."""
        self.given_existing_test_file(tmp_path)
        self.when_reconciled(_unit(tmp_path, "Add", "Sub"), tmp_path)

        assert self.result.mode == APPEND
        assert [s.name for s in self.result.signatures] == ["Sub"]

    def test_append_keeps_declaration_order(self, tmp_path):
        self.given_existing_test_file(tmp_path)
        self.when_reconciled(_unit(tmp_path, "Mul", "Add", "Div", "Sub"), tmp_path)

        assert [s.name for s in self.result.signatures] == ["Mul", "Div", "Sub"]

    def test_nothing_to_append_when_up_to_date(self, tmp_path):
        self.given_existing_test_file(tmp_path)
        self.when_reconciled(_unit(tmp_path, "Add"), tmp_path)

        assert self.result.mode == APPEND
        assert self.result.signatures == []

    def test_helpers_in_test_file_do_not_match_stubs(self, tmp_path):
        """Only the stub naming scheme counts as already generated."""
        self.given_existing_test_file(tmp_path)
        self.when_reconciled(_unit(tmp_path, "helper"), tmp_path)

        assert [s.name for s in self.result.signatures] == ["helper"]

    def test_same_name_twice_yields_one_stub(self, tmp_path):
        """Methods sharing a name on different receivers collapse to one stub."""
        self.when_reconciled(_unit(tmp_path, "String", "String"), tmp_path)

        assert [s.name for s in self.result.signatures] == ["String"]

    def test_unparseable_artifact_raises_parse_error(self, tmp_path):
        (tmp_path / "math_test.go").write_text("package calc\n\nfunc Test_( {\n")

        with pytest.raises(ParseError):
            self.when_reconciled(_unit(tmp_path, "Add"), tmp_path)


class TestExistingStubNames:
    def test_collects_all_top_level_functions(self, tmp_path):
        artifact = tmp_path / "math_test.go"
        artifact.write_text(EXISTING_TEST_FILE)

        assert existing_stub_names(artifact) == {"Test_calc_Add", "helper"}
