"""CLI for passmeter: score, validate, strength, crack-time, compare."""

import argparse
import logging
import sys

from rich import print
from rich.panel import Panel
from rich.table import Table

from .compare import compare_passwords
from .config import (
    crack_time_options_from_config,
    load_config,
    options_from_config,
    strength_table_from_config,
)
from .crack_time import calculate_crack_time
from .evaluator import compute_score, score_breakdown
from .models import CrackTimeOptions, PassmeterError
from .strength import get_strength
from .validator import validate

logger = logging.getLogger(__name__)


def cmd_score(args, cfg):
    pw = args.password
    result = compute_score(pw, options_from_config(cfg))
    tier = get_strength(result.score, strength_table_from_config(cfg))
    crack = calculate_crack_time(pw, crack_time_options_from_config(cfg))
    header = f"Score: {result.score} — {tier.label}"
    body = f"Estimated crack time: {crack.description}"
    print(Panel(body, title=header))
    if result.errors:
        print("[bold red]Policy violations:[/bold red]")
        for e in result.errors:
            print(f" • {e}")
        return 1
    if args.breakdown:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Heuristic")
        table.add_column("Points", justify="right")
        for name, value in score_breakdown(pw):
            style = "green" if value > 0 else "red" if value < 0 else "dim"
            table.add_row(name.replace("_", " "), f"[{style}]{value:+d}[/{style}]")
        print(table)
    return 0


def cmd_validate(args, cfg):
    errors = validate(args.password, options_from_config(cfg))
    if not errors:
        print("[green]Password satisfies the configured policy.[/green]")
        return 0
    for e in errors:
        print(f"[red] • {e}[/red]")
    return 1


def cmd_strength(args, cfg):
    tier = get_strength(args.score, strength_table_from_config(cfg))
    print(f"[bold]{tier.label}[/bold]")
    return 0


def cmd_crack_time(args, cfg):
    defaults = crack_time_options_from_config(cfg)
    opts = CrackTimeOptions(
        guesses_per_second=(args.guesses_per_second if args.guesses_per_second is not None
                            else defaults.guesses_per_second),
        possible_characters=(args.possible_characters if args.possible_characters is not None
                             else defaults.possible_characters),
    )
    result = calculate_crack_time(args.password, opts)
    print(f"[bold]{result.description}[/bold] ({result.seconds:.3g} seconds)")
    return 0


def cmd_compare(args, cfg):
    cmp = compare_passwords(args.old, args.new, options_from_config(cfg))
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Old score", justify="right")
    table.add_column("New score", justify="right")
    table.add_column("Change %", justify="right")
    table.add_column("Ratio", justify="right")
    table.add_row(str(cmp.old_score), str(cmp.new_score),
                  f"{cmp.difference:+.2f}", f"{cmp.difference_percentage:.2f}")
    print(table)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="passmeter")
    parser.add_argument("--config", "-c", type=str, help="Path to config.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score a password against the configured policy")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.add_argument("--breakdown", action="store_true", help="Show each heuristic's contribution")
    sc.set_defaults(func=cmd_score)

    va = sub.add_parser("validate", help="Check a password against the configured policy")
    va.add_argument("password", type=str)
    va.set_defaults(func=cmd_validate)

    st = sub.add_parser("strength", help="Map a score to a strength tier")
    st.add_argument("score", type=int)
    st.set_defaults(func=cmd_strength)

    ct = sub.add_parser("crack-time", help="Estimate brute-force crack time")
    ct.add_argument("password", type=str)
    ct.add_argument("--guesses-per-second", type=float, help="Attacker guess rate")
    ct.add_argument("--possible-characters", type=int, help="Alphabet size")
    ct.set_defaults(func=cmd_crack_time)

    cp = sub.add_parser("compare", help="Compare the scores of an old and a new password")
    cp.add_argument("old", type=str)
    cp.add_argument("new", type=str)
    cp.set_defaults(func=cmd_compare)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    cfg = load_config(args.config)
    try:
        return args.func(args, cfg)
    except (PassmeterError, ValueError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"[red]Error: {e}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())
