"""Tests for the built-in self-test."""

import pytest

from api_docgen.self_test import assert_eq, run_self_test


def test_run_self_test_passes(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that the built-in checks pass."""
    run_self_test()
    assert capsys.readouterr().out == "Self-test passed.\n"


def test_assert_eq_mismatch_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify that a failed check prints both values and exits with status 0."""
    with pytest.raises(SystemExit) as exc:
        assert_eq("a", "b")
    assert exc.value.code == 0
    assert capsys.readouterr().out == "'a' != 'b'\n"
