import json
from pathlib import Path

import pytest

from beanschema.cli import main
from tests._shared_cases import ADDRESS_SOURCE, USER_SOURCE


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_convert_prints_json_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "Address.java", ADDRESS_SOURCE)

    assert main(["convert", str(source)]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["required"] == ["province"]
    assert list(data["properties"]) == ["province", "zipCode"]


def test_convert_directory_writes_one_file_per_class(tmp_path: Path) -> None:
    sources = tmp_path / "src"
    sources.mkdir()
    _write(sources / "Address.java", ADDRESS_SOURCE)
    _write(sources / "User.java", USER_SOURCE)
    out = tmp_path / "schemas"

    assert main(["convert", str(sources), "--out", str(out), "--no-progress"]) == 0

    assert sorted(p.name for p in out.iterdir()) == ["Address.json", "User.json"]
    user = json.loads((out / "User.json").read_text(encoding="utf-8"))
    assert "user_name" in user["properties"]


def test_convert_options_are_forwarded(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "A.java", "class A { private String hidden; public String shown; }")

    assert main(["convert", str(source), "--exclude-private", "--required-strategy", "all"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert list(data["properties"]) == ["shown"]
    assert data["required"] == ["shown"]


def test_convert_reports_errors_and_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "Broken.java", "public class Broken { private String name")

    assert main(["convert", str(source)]) == 1

    err = capsys.readouterr().err
    assert "warning: Expected ';' after field 'name', skipping member" in err
    assert "PARSER_UNCLOSED_CLASS_BODY" in err


def test_convert_without_class_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "Nothing.java", "package a.b;\n")

    assert main(["convert", str(source)]) == 1
    assert "No class declaration found in the code" in capsys.readouterr().err


def test_convert_missing_file_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["convert", str(tmp_path / "Missing.java")]) == 1
    assert "beanschema:" in capsys.readouterr().err


def test_convert_non_utf8_file_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "Latin.java"
    path.write_bytes(b"class A { String \xff; }")

    assert main(["convert", str(path)]) == 1
    assert "beanschema:" in capsys.readouterr().err


def test_convert_empty_directory_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["convert", str(tmp_path)]) == 1
    assert "No .java files found" in capsys.readouterr().err


def test_check_prints_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "User.java", USER_SOURCE)

    assert main(["check", str(source)]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["valid"] is True
    assert report["className"] == "User"
    assert report["path"] == str(source)


def test_tokens_dumps_stream(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "Address.java", ADDRESS_SOURCE)

    assert main(["tokens", str(source)]) == 0

    out = capsys.readouterr().out
    assert "CLASS" in out
    assert "text='Address'" in out
    assert out.rstrip().splitlines()[-1].split()[1] == "EOF"
