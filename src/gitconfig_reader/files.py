import argparse

from . import paths
from .levels import precedence


def setup_parser(parser):
    parser.add_argument(
        "-C",
        dest="start",
        metavar="<path>",
        help="look for the repository starting from <path>",
    )


def files(args):
    start = paths.start_directory(args.start)
    for level in precedence:
        path = paths.level_file(level, start)
        print(f"{level.name.lower()}\t{path or '-'}")


def main():
    parser = argparse.ArgumentParser()
    setup_parser(parser)
    args = parser.parse_args()
    files(args)


if __name__ == "__main__":
    main()
