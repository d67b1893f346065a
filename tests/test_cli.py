import io

import pytest

from toolshelf.cli import (
    FindCommand,
    ReplaceCommand,
    main,
    parse_args,
    run_find,
    run_replace,
)


def test_parse_find_with_several_inputs():
    command = parse_args(["find", "-i", "a.txt", "b.txt", "-p", "foo"])
    assert command == FindCommand(input=["a.txt", "b.txt"], pattern="foo")


def test_parse_input_split_on_spaces():
    command = parse_args(["find", "--input", "a.txt b.txt", "--pattern", "x"])
    assert command.input == ["a.txt", "b.txt"]


def test_parse_replace_with_flag():
    command = parse_args(
        ["replace", "-i", "f.txt", "-p", "old", "-r", "new", "--ignore-case"]
    )
    assert command == ReplaceCommand(
        input=["f.txt"], pattern="old", replace="new", ignore_case=True
    )


def test_parse_replace_defaults():
    command = parse_args(["replace"])
    assert command == ReplaceCommand(input=None, pattern=None, replace=None, ignore_case=False)


def test_parse_no_command():
    assert parse_args([]) is None
    assert parse_args(["-dd"]) is None


def test_parse_unknown_command_exits():
    with pytest.raises(SystemExit) as info:
        parse_args(["delete"])
    assert info.value.code == 2


def test_run_find_leaves_file_unchanged(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("cat hat cat", encoding="utf-8")
    out = io.StringIO()
    results = run_find(FindCommand(input=[str(path)], pattern="cat"), out)
    assert results == [" hat "]
    assert path.read_text(encoding="utf-8") == "cat hat cat"
    assert 'Pattern: "cat"' in out.getvalue()
    assert 'Found Content: " hat "' in out.getvalue()


def test_run_find_missing_pattern_message(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("abc", encoding="utf-8")
    out = io.StringIO()
    results = run_find(FindCommand(input=[str(path)]), out)
    assert results == ["abc"]
    assert "Please provide a pattern." in out.getvalue()


def test_run_find_without_input_raises():
    out = io.StringIO()
    with pytest.raises(OSError):
        run_find(FindCommand(pattern="x"), out)
    assert "Please provide a file name." in out.getvalue()


def test_run_replace_rewrites_every_file(tmp_path):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_text("Hello World", encoding="utf-8")
    second.write_text("hello there", encoding="utf-8")
    out = io.StringIO()
    command = ReplaceCommand(
        input=[str(first), str(second)], pattern="hello", replace="bye", ignore_case=True
    )
    results = run_replace(command, out)
    assert results == ["bye World", "bye there"]
    assert first.read_text(encoding="utf-8") == "bye World"
    assert second.read_text(encoding="utf-8") == "bye there"
    text = out.getvalue()
    assert "Ignore case: true" in text
    assert text.count("File Content After:") == 2


def test_run_replace_is_case_sensitive_by_default(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("Hello hello", encoding="utf-8")
    results = run_replace(
        ReplaceCommand(input=[str(path)], pattern="hello", replace="X"), io.StringIO()
    )
    assert results == ["Hello X"]


def test_run_replace_escapes_newlines_in_report(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text('a\n"b"', encoding="utf-8")
    out = io.StringIO()
    run_replace(ReplaceCommand(input=[str(path)], pattern="z", replace="y"), out)
    assert 'File Content Before: "a\\n\\"b\\""' in out.getvalue()


def test_main_unknown_command(capsys):
    assert main([]) == 0
    assert "Unknown command. Use '--help' for usage instructions." in capsys.readouterr().out


def test_main_replace_changes_file(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("one two one", encoding="utf-8")
    status = main(["replace", "-i", str(path), "-p", "one", "-r", "three"])
    assert status == 0
    assert path.read_text(encoding="utf-8") == "three two three"


def test_main_missing_file_fails(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["find", "-i", str(missing), "-p", "x"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_invalid_pattern_fails(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("text", encoding="utf-8")
    assert main(["replace", "-i", str(path), "-p", "(", "-r", "x"]) == 1
    assert path.read_text(encoding="utf-8") == "text"