import argparse
import logging
import sys
from pathlib import Path

from calculator.app_shell.config import configure_logging, resolve_log_level
from calculator.components.arithmetic import ComputeInput
from calculator.components.arithmetic import run as compute
from calculator.components.formatting import render_error
from calculator.components.formatting import run as render
from calculator.rules.loader import load_rules
from calculator.rules.models import Rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"

# command -> (operation, ((arg name, type), ...))
COMMANDS: dict[str, tuple[str, tuple[tuple[str, type], ...]]] = {
    "add": ("add", (("a", float), ("b", float))),
    "subtract": ("subtract", (("a", float), ("b", float))),
    "multiply": ("multiply", (("a", float), ("b", float))),
    "divide": ("divide", (("a", float), ("b", float))),
    "power": ("power", (("base", float), ("exponent", float))),
    "sqrt": ("square_root", (("number", float),)),
    "percentage": ("percentage", (("number", float), ("percentage", float))),
    "is-even": ("is_even", (("number", int),)),
    "is-prime": ("is_prime", (("number", int),)),
    "factorial": ("factorial", (("number", int),)),
    "gcd": ("gcd", (("a", int), ("b", int))),
    "lcm": ("lcm", (("a", int), ("b", int))),
}


def get_rules(path: str | None) -> Rules:
    """Load rules from an explicit path, ./rules.yaml if present, or defaults."""
    if path is None:
        if not Path(RULES_PATH).exists():
            return Rules()
        path = RULES_PATH

    if not Path(path).exists():
        logger.error("Rules file %s not found.", path)
        sys.exit(1)
    try:
        return load_rules(Path(path))
    except ValueError as e:
        logger.error("%s", e)
        sys.exit(1)


def handle_compute(rules: Rules, args: argparse.Namespace) -> int:
    operation, params = COMMANDS[args.command]
    operands = tuple(getattr(args, name) for name, _ in params)

    limit = rules.limits.factorial_max_input
    if operation == "factorial" and operands[0] > limit:
        print(
            render_error(f"Factorial input exceeds the limit of {limit}"),
            file=sys.stderr,
        )
        return 2

    output = compute(ComputeInput(operation, operands))
    text = render(output, rules=rules.formatting)
    if not output.success:
        print(text, file=sys.stderr)
        return 1
    print(text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="calculator", description="Calculator CLI")
    parser.add_argument("--rules", help=f"Path to rules file (default: ./{RULES_PATH})")
    parser.add_argument("--log-level", help="Logging level (overrides rules)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, (operation, params) in COMMANDS.items():
        sub = subparsers.add_parser(command, help=operation.replace("_", " "))
        for name, kind in params:
            sub.add_argument(name, type=kind)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    rules = get_rules(args.rules)
    try:
        log_level = resolve_log_level(args.log_level, rules)
    except ValueError as e:
        logger.error("%s", e)
        sys.exit(1)
    configure_logging(log_level)
    return handle_compute(rules, args)


if __name__ == "__main__":
    sys.exit(main())
