import sys

from flagscan import Flag, Flags

HELP = """
Runs a server on the given port (default is 8080).

  --port    : specify the port to use.
  --help/-h : prints this help.
"""


class ServerFlags(Flags):
    port = Flag("--port", int, default=8080)
    help = Flag("--help", bool, alias="-h")


def main() -> int:
    program = sys.argv[0]
    flags, args, errors = ServerFlags.parse(sys.argv[1:])
    if errors:
        errors.print(title="Invalid arguments:")
        return 1
    if args:
        print(f"{program} doesn't take any argument.", file=sys.stderr)
        return 1
    if flags.help:
        print(f"{program}\n{program} --port 8080\n{HELP[1:]}")
        return 0

    print(f"Serving on port {flags.port}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
