"""Global flags first, then per-subcommand flags over what is left."""
import sys

from flagscan import Flag, Flags


class GlobalFlags(Flags):
    verbose = Flag("--verbose", bool, alias="-v")


class DeployFlags(Flags):
    target = Flag("--target", str, alias="-t", default="staging")
    tag = Flag("--tag", list[str])
    replicas = Flag("--replicas", int | None)


def main() -> int:
    global_flags, args, errors = GlobalFlags.parse(sys.argv[1:], unknown_are_errors=False)
    if not args or args[0] != "deploy":
        print("usage: subcommand_flags.py [-v] deploy [--target T] [--tag X]...")
        return 2

    rest = args[1:]
    deploy = DeployFlags.parse_chained(rest, errors)
    if errors:
        errors.print(title="Invalid arguments:")
        return 1

    if global_flags.verbose:
        print(f"{deploy!r} extra={rest!r}")
    replicas = deploy.replicas if deploy.replicas is not None else "default"
    print(f"Deploying {', '.join(deploy.tag) or 'latest'} to {deploy.target} ({replicas})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
