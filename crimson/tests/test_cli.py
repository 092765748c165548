"""
Tests for the crm command line entry point.
"""
import pytest

import crm


@pytest.fixture
def script(tmp_path):
    def write(source: str, name: str = "prog.crm"):
        path = tmp_path / name
        path.write_text(source)
        return str(path)
    return write


def test_runs_program(capsys, script):
    path = script('void main() { crym("hi"); }\n')
    assert crm.main(["crm", path]) == 0
    captured = capsys.readouterr()
    assert captured.out == "hi\n"
    assert captured.err == ""


@pytest.mark.parametrize("argv", [["crm"], ["crm", "a.crm", "b.crm"]])
def test_wrong_argument_count_prints_usage(capsys, argv):
    assert crm.main(argv) == 1
    assert "Usage: crm <filename.crm>" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help(capsys, flag):
    assert crm.main(["crm", flag]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_rejects_wrong_extension(capsys, script):
    path = script('void main() { crym("hi"); }\n', name="prog.txt")
    assert crm.main(["crm", path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "File must have .crm extension" in captured.err


def test_rejects_name_without_extension(capsys):
    assert crm.main(["crm", "crm"]) == 1
    assert "File must have .crm extension" in capsys.readouterr().err


def test_unreadable_file(capsys, tmp_path):
    missing = tmp_path / "missing.crm"
    assert crm.main(["crm", str(missing)]) == 1
    assert f"Could not open file {missing}" in capsys.readouterr().err


def test_structural_error_exit_code(capsys, script):
    path = script("int x = 1;\n")
    assert crm.main(["crm", path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: No main function found")


def test_runtime_error_keeps_partial_output(capsys, script):
    path = script('void main() {\n crym("one");\n Sleep(later);\n crym("two");\n}\n')
    assert crm.main(["crm", path]) == 1
    captured = capsys.readouterr()
    assert captured.out == "one\n"
    assert "Sleep() expects an integer" in captured.err
    assert "on line 3" in captured.err


def test_debug_logging_dumps_tokens_and_ast(caplog, monkeypatch, script):
    monkeypatch.setenv("CRIMSONDEBUG", "1")
    path = script('void main() { crym("hi"); }\n')
    with caplog.at_level("DEBUG", logger="crm"):
        assert crm.main(["crm", path]) == 0
    messages = [r.getMessage() for r in caplog.records if r.name == "crm"]
    assert any(m.startswith("Tokens:") for m in messages)
    assert any(m.startswith("AST:") and "'main'" in m for m in messages)
