from __future__ import annotations

import pytest

from echoguard.config import ConfigurationError, optional_float


def test_optional_float_handles_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_FLOAT", raising=False)

    assert optional_float("EXAMPLE_FLOAT") is None


def test_optional_float_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLOAT", "   ")

    assert optional_float("EXAMPLE_FLOAT") is None


def test_optional_float_parses(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLOAT", "0.5")

    assert optional_float("EXAMPLE_FLOAT") == 0.5


def test_optional_float_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLOAT", "high")

    with pytest.raises(ConfigurationError) as exc:
        optional_float("EXAMPLE_FLOAT")

    assert "EXAMPLE_FLOAT" in str(exc.value)
