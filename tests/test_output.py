from luna.markup import render_ansi
from luna.output import print_stderr, print_stdout, println_stdout


def test_print_stdout_renders_markup(capsys):
    print_stdout("<bold>hi</bold>")
    captured = capsys.readouterr()
    assert captured.out == render_ansi("<bold>hi</bold>")
    assert captured.err == ""


def test_print_stdout_empty_writes_nothing(capsys):
    print_stdout("")
    assert capsys.readouterr().out == ""


def test_print_stderr_renders_markup(capsys):
    print_stderr("<red>bad</red>")
    captured = capsys.readouterr()
    assert captured.err == render_ansi("<red>bad</red>")
    assert captured.out == ""


def test_print_stderr_empty_writes_nothing(capsys):
    print_stderr("")
    assert capsys.readouterr().err == ""


def test_println_adds_missing_newline(capsys):
    println_stdout("plain")
    assert capsys.readouterr().out == "plain\n"


def test_println_keeps_single_newline(capsys):
    println_stdout("done\n")
    assert capsys.readouterr().out == "done\n"


def test_println_empty_prints_newline(capsys):
    println_stdout("")
    assert capsys.readouterr().out == "\n"