from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from echoguard.config import ENV_FLAG_REVIEW_THRESHOLD
from echoguard.ui import cli

if TYPE_CHECKING:
    from pathlib import Path


def test_analyze_prints_one_result_per_event(
    unit_snapshot_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["analyze", str(unit_snapshot_path)])

    lines = capsys.readouterr().out.strip().splitlines()
    payloads = [json.loads(line) for line in lines]

    assert [payload["recommended_action"] for payload in payloads] == [
        "auto_skip",
        "save_unique",
    ]
    assert payloads[0]["is_probable_echo"] is True


def test_platforms_lists_registry(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["platforms"])

    output = capsys.readouterr().out
    assert "holiday-home" in output
    assert "opt_out=dontincludeimported=1" in output
    assert "re_exports=unknown" in output


def test_invalid_snapshot_exits_with_usage_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["analyze", str(path)])

    assert excinfo.value.code == 2


def test_invalid_policy_exits_with_usage_error(
    unit_snapshot_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv(ENV_FLAG_REVIEW_THRESHOLD, "nope")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["analyze", str(unit_snapshot_path)])

    assert excinfo.value.code == 2


def test_unexpected_failure_exits_with_error(
    unit_snapshot_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def boom(*_: object, **__: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "analyze_snapshot", boom)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["analyze", str(unit_snapshot_path)])

    assert excinfo.value.code == 1


def test_missing_command_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2
