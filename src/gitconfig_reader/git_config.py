#!/usr/bin/env python3

from .util import get_logger, set_verbose_logging
from . import get
from . import files

logger = get_logger()


def setup_parser(parser):
    parser.add_argument(
        "--verbose", "-v", help="more verbose output", action="store_true"
    )
    parser.set_defaults(subcommand=lambda _: parser.print_help())


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(prog="gitconfig-reader")
    setup_parser(parser)

    subparsers = parser.add_subparsers()

    def add_subcommand(name, help, setup, func):
        subparser = subparsers.add_parser(name, help=help)
        setup(subparser)
        subparser.set_defaults(subcommand=func)

    add_subcommand(
        "get",
        help="Get the value of a configuration key",
        setup=get.setup_parser,
        func=get.get,
    )
    add_subcommand(
        "files",
        help="Show the configuration file used at each level",
        setup=files.setup_parser,
        func=files.files,
    )

    args = parser.parse_args(argv)
    if args.verbose:
        set_verbose_logging(logger)

    args.subcommand(args)


if __name__ == "__main__":
    main()
