"""Tests for the ``BACKDROP_*`` environment readers."""

from __future__ import annotations

import pytest

from backdrop.utilities.env.parsing import (_env_flag, _env_float, _env_int,
                                            _env_optional_int)

VAR = "BACKDROP_TEST_VALUE"


@pytest.fixture(autouse=True)
def unset_test_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(VAR, raising=False)


class TestEnvFlag:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("true", True), ("  YES ", True), ("On", True), ("0", False), ("", False)],
    )
    def test_truthy_tokens(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        monkeypatch.setenv(VAR, value)

        assert _env_flag(VAR, default=True) is expected

    def test_default_when_unset(self) -> None:
        assert _env_flag(VAR) is False
        assert _env_flag(VAR, default=True) is True


class TestEnvInt:
    def test_optional_int_distinguishes_unset_from_zero(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        assert _env_optional_int(VAR) is None

        monkeypatch.setenv(VAR, " 0 ")
        assert _env_optional_int(VAR) == 0

    def test_int_falls_back_to_default(self) -> None:
        assert _env_int(VAR, default=32, minimum=1) == 32

    def test_minimum_is_inclusive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(VAR, "1")
        assert _env_int(VAR, default=32, minimum=1) == 1

        monkeypatch.setenv(VAR, "0")
        with pytest.raises(ValueError, match=f"{VAR} must be at least 1"):
            _env_int(VAR, default=32, minimum=1)

    @pytest.mark.parametrize("value", ["many", "2.5"])
    def test_rejects_non_integers(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv(VAR, value)

        with pytest.raises(ValueError, match=f"{VAR} must be an integer"):
            _env_optional_int(VAR)


class TestEnvFloat:
    def test_default_when_unset(self) -> None:
        assert _env_float(VAR, default=1.5, greater_than=0.0) == 1.5

    def test_inclusive_minimum_accepts_boundary(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(VAR, "0")

        assert _env_float(VAR, default=5.0, minimum=0.0) == 0.0

    def test_exclusive_bound_rejects_boundary(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(VAR, "0")

        with pytest.raises(ValueError, match=f"{VAR} must be greater than 0.0"):
            _env_float(VAR, default=1.0, greater_than=0.0)

    def test_exclusive_bound_accepts_values_above(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(VAR, "0.25")

        assert _env_float(VAR, default=1.0, greater_than=0.0) == 0.25

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
    def test_rejects_non_finite(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv(VAR, value)

        with pytest.raises(ValueError, match="finite"):
            _env_float(VAR, default=1.0, greater_than=0.0)

    def test_rejects_garbage(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(VAR, "wide")

        with pytest.raises(ValueError, match=f"{VAR} must be a float"):
            _env_float(VAR, default=1.0)
