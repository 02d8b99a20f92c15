import json

from typer.testing import CliRunner

from arbor.cli import app

runner = CliRunner()


def test_app_has_parse_command():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "parse" in result.stdout


def test_app_has_entities_command():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "entities" in result.stdout


def test_version_option():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "arbor version" in result.stdout


def test_parse_command_requires_file():
    result = runner.invoke(app, ["parse"])

    assert result.exit_code != 0


def test_parse_valid_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source_file = tmp_path / "ok.py"
    source_file.write_text("def f():\n    return 1\n")

    result = runner.invoke(app, ["parse", str(source_file)])

    assert result.exit_code == 0
    assert "0 diagnostics" in result.stdout


def test_parse_broken_file_exits_with_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source_file = tmp_path / "broken.py"
    source_file.write_text("x = 1\ny = = 2\n")

    result = runner.invoke(app, ["parse", str(source_file)])

    assert result.exit_code == 1
    assert "Syntax error at" in result.stdout


def test_parse_missing_file(tmp_path):
    result = runner.invoke(app, ["parse", str(tmp_path / "nope.py")])

    assert result.exit_code == 1


def test_parse_unsupported_language(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source_file = tmp_path / "main.go"
    source_file.write_text("package main\n")

    result = runner.invoke(app, ["parse", str(source_file), "--language", "go"])

    assert result.exit_code == 1


def test_entities_outputs_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source_file = tmp_path / "mod.py"
    source_file.write_text("""import one, two

class A(B):
    def m(self, x=5):
        pass
""")

    result = runner.invoke(app, ["entities", str(source_file)])

    assert result.exit_code == 0
    output = json.loads(result.stdout)
    assert [f["name"] for f in output["functions"]] == ["m"]
    assert output["functions"][0]["parameters"][1] == {"name": "x", "type": None, "default_value": "5"}
    assert output["classes"][0]["superclasses"] == ["B"]
    assert output["imports"][0]["kind"] == "direct"
    assert output["imports"][0]["module"] == "one"
