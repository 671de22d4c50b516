from dataclasses import dataclass

from flagscan import Char, ErrorKind, FlagError, Flag, Flags


@dataclass
class Point:
    x: float
    y: float


def parse_point(text: str) -> Point:
    x, y = text.split()
    return Point(float(x), float(y))


class DemoFlags(Flags):
    path = Flag("--path", str)
    port = Flag("--port", int, alias="-p", default=3)
    verbose = Flag("--verbose", bool)
    fruits = Flag("--fruits", list[str])
    drink = Flag("--drink", str | None)
    center = Flag("--center", parse_point, alias="-o", default=Point(1, 2))
    separator = Flag("--sep", Char)
    error_one = Flag("-e", int)
    error_two = Flag("-f", Char)


# fmt: off
ARGV = [
    "--path", "/usr",
    "--path", "/home",
    "--port", "8080",
    "-p", "8090",
    "--verbose",
    "--fruits", "orange",
    "--fruits", "banana",
    "--drink", "wine",
    "--center", "1 2",
    "--sep", ".",
    "one",
    "--two",
    "-e", "nan",
    "-f",
    "-e", "ana",
    "-f", "xx",
    "--", "a", "-b", "--port", "0",
]
# fmt: on


def test_simple_demo():
    flags, args, errors = DemoFlags.parse(ARGV)

    assert flags.path == "/home"
    assert flags.port == 8090
    assert flags.verbose is True
    assert flags.fruits == ["orange", "banana"]
    assert flags.drink == "wine"
    assert flags.center == Point(1.0, 2.0)
    assert flags.separator == "."

    assert args == ["one", "a", "-b", "--port", "0"]

    assert errors == [
        FlagError(20, "--two"),
        FlagError(21, "-e", ErrorKind.INVALID_VALUE, "nan"),
        FlagError(23, "-f", ErrorKind.MISSING_VALUE),
        FlagError(24, "-e", ErrorKind.INVALID_VALUE, "ana"),
        FlagError(26, "-f", ErrorKind.INVALID_VALUE, "xx"),
    ]
    assert errors
    assert str(errors) == (
        "Unknown flag `--two` at index 20\n"
        'Invalid value "nan" for flag `-e` at index 21\n'
        "Missing value for flag `-f` at index 23\n"
        'Invalid value "ana" for flag `-e` at index 24\n'
        'Invalid value "xx" for flag `-f` at index 26'
    )


def test_simple_demo_introspection():
    names = [(info.name, info.alias) for info in DemoFlags().flag_infos()]
    assert names == [
        ("--path", "--path"),
        ("--port", "-p"),
        ("--verbose", "--verbose"),
        ("--fruits", "--fruits"),
        ("--drink", "--drink"),
        ("--center", "-o"),
        ("--sep", "--sep"),
        ("-e", "-e"),
        ("-f", "-f"),
    ]


def test_default_is_copied_per_parse():
    first, _, _ = DemoFlags.parse([])
    first.center.x = 99
    second, _, _ = DemoFlags.parse([])
    assert second.center == Point(1, 2)
    assert DemoFlags.center.descriptor.default == Point(1, 2)


class SharedFlags(Flags):
    verbose = Flag("-v", bool)


class PortFlags(Flags):
    port = Flag("--port", int)


TWO_PASS_ARGV = ["-v", "--port", "8080", "--unknown", "value"]


def test_shared_flags_first():
    shared_flags, args, errors = SharedFlags.parse(TWO_PASS_ARGV, False)
    assert errors == []
    assert shared_flags.verbose is True
    assert args == ["--port", "8080", "--unknown", "value"]

    flags = PortFlags.parse_chained(args, errors)
    assert errors == [FlagError(2, "--unknown")]
    assert flags.port == 8080
    assert args == ["value"]


def test_command_flags_first():
    flags, args, errors = PortFlags.parse(TWO_PASS_ARGV, False)
    assert errors == []
    assert flags.port == 8080

    shared_flags = SharedFlags.parse_chained(args, errors)
    assert errors == [FlagError(1, "--unknown")]
    assert shared_flags.verbose is True
    assert args == ["value"]


class CountFlags(Flags):
    count = Flag("-n", int)
    verbose = Flag("-v", bool)


def test_incomplete_terminal_args():
    _, args, errors = CountFlags.parse(["-n"])
    assert args == []
    assert errors == [FlagError(0, "-n", ErrorKind.MISSING_VALUE)]

    _, args, errors = CountFlags.parse(["-v"])
    assert args == []
    assert errors == []
