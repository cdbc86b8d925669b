import io
import sys

import pytest

import budget


def run_main(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["budget", *args])
    budget.main()


def test_run_file_prints_tokens(monkeypatch, capsys, tmp_path):
    script = tmp_path / "rent.budget"
    script.write_text("var x = 1;\n")

    run_main(monkeypatch, str(script))

    assert capsys.readouterr().out.splitlines() == [
        "VAR var None",
        "IDENTIFIER x None",
        "EQUAL = None",
        "NUMBER 1 1.0",
        "SEMICOLON ; None",
        "EOF  None",
    ]


def test_run_file_command(monkeypatch, capsys, tmp_path):
    script = tmp_path / "rent.budget"
    script.write_text('print "hi";')

    run_main(monkeypatch, "run_file", str(script))

    assert capsys.readouterr().out.splitlines()[1] == 'STRING "hi" hi'


def test_run_file_missing(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, str(tmp_path / "missing.budget"))

    assert exc.value.code == 66
    assert "not found" in capsys.readouterr().err


def test_run_file_with_error_still_prints_tokens(monkeypatch, capsys, tmp_path):
    script = tmp_path / "bad.budget"
    script.write_text("a\n@ b")

    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, str(script))

    assert exc.value.code == 65
    captured = capsys.readouterr()
    assert captured.err == "Error [Line 2]: Unexpected character.\n"
    assert captured.out.splitlines() == [
        "IDENTIFIER a None",
        "IDENTIFIER b None",
        "EOF  None",
    ]


def test_run_source(monkeypatch, capsys):
    run_main(monkeypatch, "run", "1 + 2")

    assert capsys.readouterr().out.splitlines() == [
        "NUMBER 1 1.0",
        "PLUS + None",
        "NUMBER 2 2.0",
        "EOF  None",
    ]


def test_run_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("nil"))

    run_main(monkeypatch, "run", "-")

    assert capsys.readouterr().out.splitlines() == ["NIL nil None", "EOF  None"]


def test_run_source_with_error(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "run", '"open')

    assert exc.value.code == 65
    assert capsys.readouterr().err == "Error [Line 1]: Unterminated string.\n"


def test_unknown_command(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "print_ast", "x")

    assert exc.value.code == 66
    assert "unrecognized command: print_ast" in capsys.readouterr().err


def test_too_many_arguments(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run_main(monkeypatch, "run", "a", "b")

    assert exc.value.code == 64
    assert capsys.readouterr().out == "Usage: budget [command] [script]\n"


@pytest.mark.parametrize("args", [(), ("run_prompt",)])
def test_prompt(monkeypatch, capsys, args):
    monkeypatch.setattr(sys, "stdin", io.StringIO("@\nfun\n"))

    run_main(monkeypatch, *args)

    captured = capsys.readouterr()
    assert captured.err == "Error [Line 1]: Unexpected character.\n"
    assert "FUN fun None" in captured.out
    assert captured.out.count("EOF  None") == 2


def test_prompt_stops_on_empty_line(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\nvar\n"))

    run_main(monkeypatch)

    assert "VAR" not in capsys.readouterr().out
