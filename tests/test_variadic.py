import pytest

from hdlab.variadic import format_variadic, main, variadic_print


def test_no_arguments():
    assert format_variadic("initial") == (
        "variadic_print called with 0 parameters.\ninitial: \n\n\n"
    )


def test_arguments_are_numbered():
    lines = format_variadic("initial", "test1", "test2").splitlines()
    assert lines[0] == "variadic_print called with 2 parameters."
    assert lines[1] == "initial: "
    assert lines[2] == "arg: 1, value: test1"
    assert lines[3] == "arg: 2, value: test2"


def test_non_string_argument():
    with pytest.raises(TypeError):
        format_variadic("initial", 3)


def test_print_matches_format(capsys):
    variadic_print("label", "a", "b", "c")
    assert capsys.readouterr().out == format_variadic("label", "a", "b", "c")


def test_main(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("variadic_print called with") == 3
    assert out.count("arg: 1, value: test1") == 2