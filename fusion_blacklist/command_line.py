import argparse
import sys

from logzero import logger

import fusion_blacklist
from fusion_blacklist.filter_blacklist import add_blacklist_filter_args


epilog = "Copyright (c) 2023 TRON gGmbH"


def fusion_blacklist_cli():
    parser = argparse.ArgumentParser(
        description="fusion-blacklist v{}".format(fusion_blacklist.__version__),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        epilog=epilog,
    )

    subparsers = parser.add_subparsers(description="Commands")

    filter_parser = subparsers.add_parser(
        "filter",
        description="Removes fusion candidates matching rules of a blacklist",
        epilog=epilog,
    )
    add_blacklist_filter_args(filter_parser)

    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.parse_args(["--help"])
    try:
        args.func(args)
    except (AssertionError, ValueError, OSError) as e:
        logger.exception(e)
        sys.exit(1)
