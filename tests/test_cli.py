import io
import json
from pathlib import Path
from typing import Any

import pytest

from objpath.__main__ import main


def _write(tmp_path: Path, document: Any) -> str:
    path = tmp_path / "document.json"
    _ = path.write_text(json.dumps(document), encoding="utf-8")
    return str(path)


def _run(capsys: pytest.CaptureFixture[str], *args: str) -> Any:
    main(list(args))
    return json.loads(capsys.readouterr().out)


def test_version_flag_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exit_info:
        main(["--version"])
    assert exit_info.value.code == 0
    assert capsys.readouterr().out.strip()


def test_get_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path, {"person": {"names": ["Rosario", "Charito"]}})
    assert _run(capsys, "get", source, "person.names.1") == "Charito"
    assert _run(capsys, "get", source, "person/names", "-d", "/") == ["Rosario", "Charito"]
    assert _run(capsys, "get", source, "missing") is None


def test_get_strict_missing_path_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path, {})
    with pytest.raises(SystemExit) as exit_info:
        main(["get", source, "x.y", "--strict"])
    assert exit_info.value.code == 1
    assert "There's nothing on 'x'" in capsys.readouterr().err


def test_set_command_parses_json_values(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path, {})
    assert _run(capsys, "set", source, "a.0.b", "5") == {"a": [{"b": 5}]}
    assert _run(capsys, "set", source, "name", "Rosario") == {"name": "Rosario"}


def test_delete_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path, {"name": {"first": "Rosario"}})
    assert _run(capsys, "delete", source, "name.first") == {}
    assert _run(capsys, "delete", source, "name.first", "--keep-empty") == {"name": {}}


def test_extract_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path, {"name": {"first": "Rosario"}, "age": 3, "planet": "earth"})
    assert _run(capsys, "extract", source, "age", "who=name.first") == {"age": 3, "who": "Rosario"}


def test_flat_and_unflat_commands(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path, {"total": 1, "person": {"age": 3}})
    assert _run(capsys, "flat", source) == {"total": 1, "person.age": 3}
    assert _run(capsys, "flat", source, "--prefix", "root") == {"root.total": 1, "root.person.age": 3}

    flattened = _write(tmp_path, {"total": 1, "person.age": 3})
    assert _run(capsys, "unflat", flattened) == {"total": 1, "person": {"age": 3}}


def test_keys_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path, {"nameInfo": {"firstName": "Rosario", "nickName": "Charito"}})
    assert _run(capsys, "keys", source, "lower-camel-to-snake", "-e", "nameInfo.nickName") == {
        "name_info": {"first_name": "Rosario", "nickName": "Charito"},
    }


def test_reads_from_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"a": {"b": 1}}'))
    assert _run(capsys, "get", "-", "a.b") == 1


def test_missing_file_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exit_info:
        main(["get", str(tmp_path / "missing.json"), "a"])
    assert exit_info.value.code == 1
    assert "objpath: error:" in capsys.readouterr().err


def test_invalid_json_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "broken.json"
    _ = source.write_text("{not json", encoding="utf-8")
    with pytest.raises(SystemExit) as exit_info:
        main(["get", str(source), "a"])
    assert exit_info.value.code == 1
    assert "objpath: error:" in capsys.readouterr().err
