import argparse

from .config import LookupRequest, find_value
from .errors import GitConfigError
from .levels import Level
from .util import die_error


def setup_parser(parser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--local",
        dest="level",
        help="read only the repository config file",
        action="store_const",
        const=Level.LOCAL,
    )
    group.add_argument(
        "--global",
        dest="level",
        help="read only the user-wide config file",
        action="store_const",
        const=Level.GLOBAL,
    )
    group.add_argument(
        "--system",
        dest="level",
        help="read only the system-wide config file",
        action="store_const",
        const=Level.SYSTEM,
    )
    parser.set_defaults(level=Level.UNSPECIFIED)
    parser.add_argument(
        "-C",
        dest="start",
        metavar="<path>",
        help="look for the repository starting from <path>",
    )
    parser.add_argument(
        "--show-origin", help="show the file the value came from", action="store_true"
    )
    parser.add_argument(
        "--show-scope", help="show the level the value came from", action="store_true"
    )
    parser.add_argument("key", help="section.name")
    return parser


def get(args):
    request = LookupRequest(args.key, args.level, args.start)
    try:
        resolution = find_value(request)
    except GitConfigError as e:
        die_error(f"error: {e}")
    prefix = []
    if args.show_scope:
        prefix.append(resolution.level.name.lower())
    if args.show_origin:
        prefix.append(f"file:{resolution.path}")
    print("\t".join(prefix + [resolution.value]))


def main():
    parser = argparse.ArgumentParser()
    setup_parser(parser)
    args = parser.parse_args()
    get(args)


if __name__ == "__main__":
    main()
