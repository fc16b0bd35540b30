"""CLI for PassGauge: score, generate, config."""

import argparse
import json
import logging
import sys
from getpass import getpass

from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import DEFAULTS, clamp_input, load_config, update_config
from .crack_time import estimate_time_to_crack
from .evaluator import CRITERIA_LABELS, StrengthLevel, analyze
from .generator import generate_password

LEVEL_STYLES = {
    StrengthLevel.EMPTY: "dim",
    StrengthLevel.VERY_WEAK: "red",
    StrengthLevel.WEAK: "red",
    StrengthLevel.MEDIUM: "yellow",
    StrengthLevel.STRONG: "green",
    StrengthLevel.VERY_STRONG: "bold green",
}


def cmd_score(args):
    cfg = load_config()
    pw = args.password if args.password is not None else getpass("Password to evaluate (input hidden): ")
    pw = clamp_input(pw, cfg)
    result = analyze(pw)
    crack = estimate_time_to_crack(pw, result.score)

    if args.json:
        out = result.to_dict()
        out["time_to_crack"] = crack
        sys.stdout.write(json.dumps(out, ensure_ascii=False, indent=2) + "\n")
        return 0

    style = LEVEL_STYLES[result.level]
    header = f"Score: {result.score} / 100 — [{style}]{result.level.label}[/{style}]"
    print(Panel(f"Estimated time to crack: {crack}", title=header))

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Criterion")
    table.add_column("Met", justify="center")
    for name, met in result.criteria:
        table.add_row(CRITERIA_LABELS[name], "[green]✓[/green]" if met else "[red]✗[/red]")
    print(table)

    print("[bold]Feedback:[/bold]")
    for line in result.feedback:
        print(f" • {line}")
    print("\n[bold]Suggestions:[/bold]")
    for line in result.suggestions:
        print(f"   {line}")
    return 0

def cmd_generate(args):
    cfg = load_config()
    length = args.length if args.length is not None else int(cfg.get("generated_length", DEFAULTS["generated_length"]))
    for i in range(args.copies):
        try:
            pw = generate_password(length=length)
        except ValueError as e:
            print(f"[red]Cannot generate password: {e}[/red]")
            return 2
        line = f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}"
        if args.score:
            result = analyze(pw)
            line += f"  ({result.score} / 100, {result.level.label})"
        print(line)
    return 0

def cmd_config(args):
    if args.set:
        try:
            cfg = update_config(args.set)
        except ValueError as e:
            print(f"[red]{e}[/red]")
            return 2
        print("[green]Settings saved.[/green]")
    else:
        cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, str(cfg.get(key)))
    print(table)
    return 0

def build_parser():
    parser = argparse.ArgumentParser(prog="passgauge")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score a password and show feedback")
    sc.add_argument("password", nargs="?", type=str, help="Password to evaluate (prompted if omitted)")
    sc.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    sc.set_defaults(func=cmd_score)

    gen = sub.add_parser("generate", help="Generate one or more strong passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length (default from settings)")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--score", action="store_true", help="Also show the score of each password")
    gen.set_defaults(func=cmd_generate)

    cf = sub.add_parser("config", help="Show or change settings")
    cf.add_argument("--set", action="append", metavar="KEY=VALUE", help="Change a setting (repeatable)")
    cf.set_defaults(func=cmd_config)
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)

if __name__ == "__main__":
    sys.exit(main())
