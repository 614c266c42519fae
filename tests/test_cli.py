import io
import json

import pytest

import cli


def test_analyze_file(tmp_path, capsys):
	p = tmp_path / "snippet.py"
	p.write_text("def foo(x):\n    pass\n")
	assert cli.main(["analyze", str(p)]) == 0
	out = capsys.readouterr().out
	assert "== Explanation ==" in out
	assert "Found 1 function(s): Python: function foo(x)." in out
	assert "### Function `foo()`" in out


def test_analyze_stdin_json(monkeypatch, capsys):
	monkeypatch.setattr("sys.stdin", io.StringIO("const add = (a, b) => a + b;"))
	assert cli.main(["analyze", "--json"]) == 0
	data = json.loads(capsys.readouterr().out)
	assert data["functions"][0]["name"] == "add"
	assert data["functions"][0]["form"] == "arrow"


def test_analyze_empty_input(monkeypatch, capsys):
	monkeypatch.setattr("sys.stdin", io.StringIO("   \n"))
	assert cli.main(["analyze", "-"]) == 1
	captured = capsys.readouterr()
	assert captured.out == ""
	assert "Please enter a code snippet" in captured.err


def test_analyze_locale_option(tmp_path, capsys):
	p = tmp_path / "snippet.js"
	p.write_text("function init() {}")
	assert cli.main(["analyze", "--locale", "pt", str(p)]) == 0
	assert "função init(sem parâmetros)" in capsys.readouterr().out


def test_analyze_bad_locale(tmp_path):
	p = tmp_path / "snippet.js"
	p.write_text("x")
	with pytest.raises(SystemExit):
		cli.main(["analyze", "--locale", "xx", str(p)])


def test_serve_runs_uvicorn(monkeypatch):
	calls = {}

	def fake_run(app, **kwargs):
		calls["app"] = app
		calls.update(kwargs)

	monkeypatch.setattr(cli.uvicorn, "run", fake_run)
	assert cli.main(["serve", "--port", "9001"]) == 0
	assert calls["app"] == "web.app:app"
	assert calls["port"] == 9001
	assert calls["reload"] is False
