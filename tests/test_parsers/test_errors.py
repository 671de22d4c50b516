from io import StringIO

from rich.console import Console

from flagscan import ErrorKind, FlagError, FlagErrors
from flagscan.errors import quoted


def test_render_each_kind():
    assert FlagError(3, "--two").render() == "Unknown flag `--two` at index 3"
    assert (
        FlagError(4, "-f", ErrorKind.MISSING_VALUE).render()
        == "Missing value for flag `-f` at index 4"
    )
    assert (
        FlagError(5, "-e", ErrorKind.INVALID_VALUE, "nan").render()
        == 'Invalid value "nan" for flag `-e` at index 5'
    )


def test_rejected_value_is_quoted():
    assert quoted('say "hi"') == '"say \\"hi\\""'
    assert quoted("C:\\tmp") == '"C:\\\\tmp"'
    error = FlagError(0, "--msg", ErrorKind.INVALID_VALUE, 'a "b"')
    assert str(error) == 'Invalid value "a \\"b\\"" for flag `--msg` at index 0'


def test_empty_errors_are_falsy():
    errors = FlagErrors()
    assert not errors
    assert not errors.has_errors
    assert errors.render() == []
    assert str(errors) == ""


def test_errors_keep_insertion_order_and_duplicates():
    errors = FlagErrors()
    errors.append(FlagError(2, "-x"))
    errors.append(FlagError(0, "-y"))
    errors.append(FlagError(2, "-x"))
    assert errors.has_errors
    assert errors.render() == [
        "Unknown flag `-x` at index 2",
        "Unknown flag `-y` at index 0",
        "Unknown flag `-x` at index 2",
    ]


def test_print_through_rich_console():
    buffer = StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    errors = FlagErrors([FlagError(1, "--[bold]"), FlagError(2, "-e", ErrorKind.MISSING_VALUE)])
    errors.print(console, title="Invalid arguments:")
    output = buffer.getvalue()
    assert "Invalid arguments:" in output
    assert "Unknown flag `--[bold]` at index 1" in output
    assert "Missing value for flag `-e` at index 2" in output


def test_repr():
    assert repr(FlagErrors()) == "FlagErrors([])"
