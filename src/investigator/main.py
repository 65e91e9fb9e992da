"""Command line entry point for Investigator Sheet."""

import argparse
import asyncio
import sys
from collections.abc import Sequence

import structlog

from investigator.config import Settings, get_settings
from investigator.logging_setup import configure_logging
from investigator.models import ATTRIBUTE_CODES, AttributeName, AttributeSet, CharacterRecord, parse_attribute_name
from investigator.rules import age_rule_text, calculate_derived_stats, derive_final
from investigator.sheet import DEFAULT_RAW, NAME_POOLS, CharacterSheet, generate_name
from investigator.storage import CharacterStore, TransportError, open_store

logger = structlog.get_logger(__name__)


def parse_raw_assignment(text: str) -> tuple[AttributeName, int]:
    """Parse ``attr=value`` as given to ``--raw``."""
    name, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected attr=value, got {text!r}")
    try:
        return parse_attribute_name(name), int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="investigator", description="Call of Cthulhu character sheets and roster"
    )
    parser.add_argument(
        "--backend", choices=["spreadsheet", "local"], help="Storage backend override"
    )
    parser.add_argument("--api-url", help="Spreadsheet web app URL override")

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List characters, most recently saved first")

    show = commands.add_parser("show", help="Show one character sheet")
    show.add_argument("character_id", help="Character id")

    new = commands.add_parser("new", help="Create and save a new character")
    new.add_argument("--name", default="", help="Character name")
    new.add_argument("--player", default="", help="Player name")
    new.add_argument("--occupation", default="", help="Occupation")
    new.add_argument("--age", type=int, default=25, help="Age in years")
    new.add_argument(
        "--raw",
        action="append",
        type=parse_raw_assignment,
        default=[],
        metavar="ATTR=VALUE",
        help="Raw dice result, e.g. str=12 or size=8 (repeatable)",
    )

    remove = commands.add_parser("delete", help="Delete a character")
    remove.add_argument("character_id", help="Character id")

    name = commands.add_parser("name", help="Suggest a random name")
    name.add_argument("pool", choices=NAME_POOLS, nargs="?", default="en", help="Name pool")

    derive = commands.add_parser("derive", help="Show derived values for raw rolls")
    derive.add_argument("--age", type=int, default=25, help="Age in years")
    derive.add_argument(
        "--raw",
        action="append",
        type=parse_raw_assignment,
        default=[],
        metavar="ATTR=VALUE",
        help="Raw dice result (repeatable); unset values use the defaults",
    )

    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Layer command line options over loaded settings."""
    update = {}
    if args.backend:
        update["storage_backend"] = args.backend
    if args.api_url:
        update["api_url"] = args.api_url
    return settings.model_copy(update=update) if update else settings


def format_attributes(record: CharacterRecord) -> list[str]:
    lines = []
    for attr, code in ATTRIBUTE_CODES.items():
        lines.append(
            f"  {code.upper():<5} raw {record.raw.get(attr):>3}  final {record.final.get(attr):>3}"
        )
    return lines


def format_sheet(sheet: CharacterSheet) -> str:
    """Render a sheet as plain text."""
    record = sheet.record
    lines = [
        f"{record.name or '(unnamed)'}  [{record.id}]" + ("  LOST" if record.is_lost else ""),
        f"  Player: {record.player}  Occupation: {record.occupation}  Age: {record.age}",
        "",
        "Characteristics:",
        *format_attributes(record),
        "",
        f"HP {record.hp.current}/{record.hp.max}  MP {record.mp.current}/{record.mp.max}  "
        f"SAN {record.sanity.current}/{record.sanity.max} (start {record.sanity.start})  "
        f"Luck {record.luck.current}",
        f"Damage bonus {record.damage_bonus}  Build {record.build}  MOV {record.move_rate}",
    ]

    advisory = sheet.age_advisory
    if advisory:
        lines += ["", advisory]

    lines += ["", "Skills:"]
    for name, totals in sheet.skill_totals():
        lines.append(f"  {name:<28} {totals.total:>3} {totals.half:>3} {totals.fifth:>3}")

    occupation, interest = sheet.budgets
    lines.append("")
    for label, budget in (("Occupation", occupation), ("Interest", interest)):
        warning = "  (over budget)" if budget.exceeded else ""
        lines.append(f"{label} points: {budget.used}/{budget.limit}{warning}")

    return "\n".join(lines)


def format_roster_line(record: CharacterRecord) -> str:
    status = " LOST" if record.is_lost else ""
    return (
        f"{record.id}  {record.name or '(unnamed)'}  {record.occupation}  "
        f"age {record.age}  {record.updated_at:%Y-%m-%d %H:%M}{status}"
    )


def raw_from_assignments(assignments: Sequence[tuple[AttributeName, int]]) -> AttributeSet:
    raw = DEFAULT_RAW
    for attr, value in assignments:
        raw = raw.replace(attr, value)
    return raw


async def run_command(args: argparse.Namespace, settings: Settings) -> int:
    """Run one subcommand and return the process exit code."""
    if args.command == "name":
        print(generate_name(args.pool))
        return 0

    if args.command == "derive":
        raw = raw_from_assignments(args.raw)
        final = derive_final(raw)
        derived = calculate_derived_stats(final, args.age)
        for attr, code in ATTRIBUTE_CODES.items():
            print(f"{code.upper():<5} {raw.get(attr):>3} -> {final.get(attr):>3}")
        print(
            f"HP max {derived.hp_max}  MP max {derived.mp_max}  Damage bonus "
            f"{derived.damage_bonus}  Build {derived.build}  MOV {derived.move_rate}"
        )
        advisory = age_rule_text(args.age)
        if advisory:
            print(advisory)
        return 0

    store: CharacterStore = await open_store(settings)
    try:
        if args.command == "list":
            for record in await store.list_recent():
                print(format_roster_line(record))
            return 0

        if args.command == "show":
            record = await store.get(args.character_id)
            if record is None:
                print(f"No character with id {args.character_id}", file=sys.stderr)
                return 1
            print(format_sheet(CharacterSheet(record, settings.occupation_point_budget)))
            return 0

        if args.command == "new":
            sheet = CharacterSheet(occupation_budget=settings.occupation_point_budget)
            sheet.set_details(name=args.name, player=args.player, occupation=args.occupation)
            sheet.set_age(args.age)
            for attr, value in args.raw:
                sheet.set_raw(attr, value)
            await sheet.save(store)
            print(sheet.record.id)
            return 0

        if args.command == "delete":
            await store.delete(args.character_id)
            return 0
    finally:
        await store.close()

    return 2


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and run the requested command."""
    args = build_parser().parse_args(argv)
    settings = apply_overrides(get_settings(), args)
    configure_logging(settings)

    try:
        return asyncio.run(run_command(args, settings))
    except TransportError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run() -> None:
    """
    Synchronous console script entry point.
    """
    sys.exit(main())


if __name__ == "__main__":
    run()
