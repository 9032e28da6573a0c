import argparse
import logging
import sys

from kodama.errors import ParseError
from kodama.parser import parse, print_tree


logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_RECURSION_LIMIT = 5000


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="kodama",
        description="Parse an HTML subset document and print its node tree."
    )
    argparser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="file to parse, '-' or nothing reads stdin"
    )
    argparser.add_argument("--encoding", default="utf-8")
    # recursion limit increase for deep HTML trees
    argparser.add_argument(
        "--recursion-limit", type=int, default=DEFAULT_RECURSION_LIMIT
    )
    argparser.add_argument(
        "--log-level", choices=LOG_LEVELS, default="WARNING"
    )
    return argparser


def read_source(path: str, encoding: str) -> str:
    if path == "-":
        return sys.stdin.buffer.read().decode(encoding)
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.setrecursionlimit(args.recursion_limit)

    source = read_source(args.path, args.encoding)
    try:
        root = parse(source)
    except ParseError as e:
        logger.error("Failed to parse %s: %s", args.path, e)
        return 1

    print_tree(root)
    return 0
