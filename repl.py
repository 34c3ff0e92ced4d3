import argparse
import logging
from typing import Optional

from linecalc.parser import Parser
from linecalc.tokenizer import Tokenizer, tokenize
from linecalc.utils import CalculatorError

EXIT_COMMANDS = {"q", "quit"}


def run_line(code: str, show_tokens: bool = False) -> bool:
    if show_tokens:
        try:
            print(f"tokens: {' '.join(str(t) for t in tokenize(code))}")
        except CalculatorError as e:
            print(e)
            return False

    try:
        result = Parser(Tokenizer(code), code=code).parse()
    except CalculatorError as e:
        print(e)
        return False

    print(result)
    return True


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="linecalc", description="Evaluate arithmetic expressions line by line")
    parser.add_argument("-c", "--command", default=None, help="evaluate a single expression and exit")
    parser.add_argument("--prompt", default="> ")
    parser.add_argument("--tokens", action="store_true", help="print tokens before each result")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is not None:
        return 0 if run_line(args.command, show_tokens=args.tokens) else 1

    while True:
        try:
            code = input(args.prompt)
        except EOFError:
            print()
            return 0

        if code.strip() in EXIT_COMMANDS:
            return 0
        if not code.strip():
            continue

        run_line(code, show_tokens=args.tokens)


if __name__ == "__main__":
    raise SystemExit(main())
