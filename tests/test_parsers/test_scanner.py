import pytest

from flagscan import ErrorKind, FlagError, FlagErrors, FlagSetBuilder


@pytest.fixture
def flag_set():
    builder = FlagSetBuilder()
    builder.add_flag("--port", int, alias="-p", default=8080)
    builder.add_flag("--verbose", bool, alias="-v")
    builder.add_flag("--tag", list[str])
    builder.add_flag("--level", int | None)
    builder.add_flag("-f", str, dest="file")
    return builder.build()


def test_empty_tokens(flag_set):
    values, args, errors = flag_set.parse([])
    assert values.port == 8080
    assert values.verbose is False
    assert values.tag == []
    assert values.level is None
    assert args == []
    assert errors == []
    assert not errors


def test_positionals_keep_relative_order(flag_set):
    values, args, errors = flag_set.parse(["a", "--port", "1", "b", "-v", "c"])
    assert args == ["a", "b", "c"]
    assert values.port == 1
    assert values.verbose is True
    assert not errors


def test_terminator_copies_rest_verbatim(flag_set):
    values, args, errors = flag_set.parse(["x", "--", "--port", "0", "-v", "--"])
    assert args == ["x", "--port", "0", "-v", "--"]
    assert values.port == 8080
    assert values.verbose is False
    assert not errors


def test_terminator_alone(flag_set):
    _, args, errors = flag_set.parse(["--"])
    assert args == []
    assert not errors


def test_scalar_last_write_wins(flag_set):
    values, _, _ = flag_set.parse(["--port", "1", "-p", "2"])
    assert values.port == 2


def test_repeated_appends_in_order(flag_set):
    values, _, _ = flag_set.parse(["--tag", "a", "--tag", "b"])
    assert values.tag == ["a", "b"]


def test_optional_absent_until_given(flag_set):
    values, _, _ = flag_set.parse(["--level", "3", "--level", "4"])
    assert values.level == 4


def test_boolean_never_consumes_value(flag_set):
    values, args, errors = flag_set.parse(["--verbose", "yes"])
    assert values.verbose is True
    assert args == ["yes"]
    assert not errors


def test_invalid_value(flag_set):
    values, args, errors = flag_set.parse(["--port", "notanum"])
    assert errors == [FlagError(0, "--port", ErrorKind.INVALID_VALUE, "notanum")]
    assert args == []
    assert values.port == 8080


def test_missing_value_at_end(flag_set):
    _, args, errors = flag_set.parse(["a", "-f"])
    assert errors == [FlagError(1, "-f", ErrorKind.MISSING_VALUE)]
    assert args == ["a"]


def test_dash_prefixed_value_is_missing(flag_set):
    values, args, errors = flag_set.parse(["--port", "-1"])
    assert errors == [
        FlagError(0, "--port", ErrorKind.MISSING_VALUE),
        FlagError(1, "-1", ErrorKind.UNKNOWN),
    ]
    assert values.port == 8080
    assert args == []


def test_terminator_after_flag_is_not_a_value(flag_set):
    _, args, errors = flag_set.parse(["-f", "--", "rest"])
    assert errors == [FlagError(0, "-f", ErrorKind.MISSING_VALUE)]
    assert args == ["rest"]


def test_unknown_as_error(flag_set):
    _, args, errors = flag_set.parse(["--bogus"])
    assert errors == [FlagError(0, "--bogus", ErrorKind.UNKNOWN)]
    assert args == []


def test_unknown_as_positional(flag_set):
    _, args, errors = flag_set.parse(["--bogus"], unknown_are_errors=False)
    assert args == ["--bogus"]
    assert not errors


def test_unknown_flag_does_not_consume_value(flag_set):
    _, args, errors = flag_set.parse(["--bogus", "value"])
    assert args == ["value"]
    assert len(errors) == 1


def test_repeated_failure_is_discarded(flag_set):
    builder = FlagSetBuilder()
    builder.add_flag("-n", list[int], dest="numbers")
    values, _, errors = builder.build().parse(["-n", "1", "-n", "x", "-n", "3"])
    assert values.numbers == [1, 3]
    assert errors == [FlagError(2, "-n", ErrorKind.INVALID_VALUE, "x")]


def test_optional_failure_keeps_previous(flag_set):
    values, _, errors = flag_set.parse(["--level", "2", "--level", "high"])
    assert values.level == 2
    assert errors[0].kind is ErrorKind.INVALID_VALUE


def test_invalid_value_consumes_two_tokens(flag_set):
    _, args, errors = flag_set.parse(["--port", "x", "y"])
    assert args == ["y"]
    assert len(errors) == 1


def test_errors_accumulate_in_scan_order(flag_set):
    _, _, errors = flag_set.parse(["--nope", "--port", "x", "--nope", "-f"])
    assert [(e.position, e.kind) for e in errors] == [
        (0, ErrorKind.UNKNOWN),
        (1, ErrorKind.INVALID_VALUE),
        (3, ErrorKind.UNKNOWN),
        (4, ErrorKind.MISSING_VALUE),
    ]
    assert isinstance(errors, FlagErrors)


def test_empty_value_token_is_converted(flag_set):
    values, _, errors = flag_set.parse(["-f", ""])
    assert values.file == ""
    assert not errors


def test_parse_is_deterministic(flag_set):
    tokens = ["--tag", "a", "--bogus", "x", "--port", "7", "--", "-v"]
    first = flag_set.parse(tokens)
    second = flag_set.parse(tokens)
    assert first.values == second.values
    assert first.args == second.args
    assert first.errors == second.errors


def test_parse_does_not_mutate_tokens_or_defaults(flag_set):
    tokens = ["--tag", "a"]
    flag_set.parse(tokens)
    values, _, _ = flag_set.parse([])
    assert tokens == ["--tag", "a"]
    assert values.tag == []


def test_first_declared_flag_wins():
    builder = FlagSetBuilder()
    builder.add_flag("--mode", str, dest="first")
    builder.add_flag("--other", str, alias="--mode", dest="second")
    values, _, errors = builder.build().parse(["--mode", "fast"])
    assert values.first == "fast"
    assert values.second is None
    assert not errors


def test_explicit_scalar_bool_takes_a_value():
    builder = FlagSetBuilder()
    builder.add_flag("--color", bool, kind="scalar")
    values, args, errors = builder.build().parse(["--color", "off", "x"])
    assert values.color is False
    assert args == ["x"]
    assert not errors
