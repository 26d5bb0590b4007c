import argparse
import logging
import sys
from pathlib import Path
from pydantic import ValidationError
from tokenizer import scan
from parser import parse, format_tree
from executor import evaluate, stringify, Value
from errors import LoxError
from config import DriverConfig
from constants import DEFAULT_MAX_SOURCE_SIZE, DEFAULT_RECURSION_LIMIT

logger = logging.getLogger(__name__)

def execute(source: str) -> Value:
    return evaluate(parse(scan(source)))

def load_source(path: str | Path, max_source_size: int) -> str:
    path = Path(path)
    try:
        size = path.stat().st_size
    except OSError as e:
        raise LoxError(f"Cannot open {path}: {e.strerror}") from e
    if not path.is_file():
        raise LoxError(f"Not a regular file: {path}")
    if size > max_source_size:
        raise LoxError(
            f"{path} is {size} bytes, over the {max_source_size} byte limit"
        )
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise LoxError(f"Cannot read {path}: {e}") from e

def _run(source: str, config: DriverConfig) -> None:
    try:
        tree = parse(scan(source))
        if config.show_tree:
            print(format_tree(tree))
        print(stringify(evaluate(tree)))
    except RecursionError as e:
        raise LoxError("Expression too deep") from e

def run_file(path: str | Path, config: DriverConfig) -> int:
    try:
        source = load_source(path, config.max_source_size)
        logger.debug("loaded %d characters from %s", len(source), path)
        _run(source, config)
    except LoxError as e:
        print(f"ERROR: {e.message}.", file=sys.stderr)
        return 1
    return 0

def run_repl(config: DriverConfig) -> int:
    while True:
        try:
            line = input(config.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        if not line.strip():
            continue
        try:
            _run(line, config)
        except KeyboardInterrupt:
            print("Interrupted.", file=sys.stderr)
        except LoxError as e:
            print(f"{e.message}.", file=sys.stderr)

def main(argv: list[str] | None = None) -> int:
    arg_parser = argparse.ArgumentParser(
        prog='lox',
        description="Evaluate Lox expressions from a file or interactively."
    )
    arg_parser.add_argument(
        'script', nargs='?', help="source file, omit for the REPL"
    )
    arg_parser.add_argument(
        '--max-source-size', type=int, default=DEFAULT_MAX_SOURCE_SIZE,
        help="largest source file accepted, in bytes"
    )
    arg_parser.add_argument(
        '--tree', action='store_true',
        help="print the parsed tree before the value"
    )
    arg_parser.add_argument(
        '--log-level', default='WARNING',
        help="logging level name, e.g. INFO or DEBUG"
    )
    arg_parser.add_argument(
        '--recursion-limit', type=int, default=DEFAULT_RECURSION_LIMIT,
        help="Python recursion limit while evaluating, bounds expression depth"
    )
    arg_parser.add_argument(
        '-v', '--verbose', action='store_true', help="same as --log-level DEBUG"
    )
    args = arg_parser.parse_args(argv)
    try:
        config = DriverConfig(
            max_source_size=args.max_source_size,
            show_tree=args.tree,
            log_level='DEBUG' if args.verbose else args.log_level,
            recursion_limit=args.recursion_limit,
        )
    except ValidationError as e:
        arg_parser.error(str(e))
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s"
    )
    # only ever raised
    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.recursion_limit))
    if args.script is None:
        return run_repl(config)
    return run_file(args.script, config)

if __name__ == '__main__':
    sys.exit(main())
