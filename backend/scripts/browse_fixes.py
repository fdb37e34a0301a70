#!/usr/bin/env python3
"""
101 Fixes - Terminal Client
Visitor-side client: unlock the catalog with an email, browse and filter the
fixes, and track progress in a local JSON file (FIX_PROGRESS_PATH).

Usage:
    python -m scripts.browse_fixes subscribe <email>
    python -m scripts.browse_fixes list --email <email> [--search TEXT] [--difficulty D] [--channel C] [--progress P]
    python -m scripts.browse_fixes show --email <email> <fix_id>
    python -m scripts.browse_fixes set --email <email> <fix_id> <Pending|In Progress|Done>
    python -m scripts.browse_fixes stats --email <email>
    python -m scripts.browse_fixes sheet <email>
    python -m scripts.browse_fixes apply --name N --brand B --store-url U --ad-spend S --email E

Catalog commands re-check access on every run, the way a returning visitor
is recognised on the landing page.
"""
import argparse
import asyncio
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, init_db
from app.models.catalog import ALL, Channel, Difficulty, Progress, UnknownFixError
from app.models.db_models import MonthlyAdSpend
from app.services.access_gate import AccessGate, GateNotice, LocalAccessStoreClient, SheetShortcut
from app.services.access_store import AccessStoreError, subscriber_watch_hub
from app.services.catalog import CatalogEngine, JsonFileProgressStorage
from app.services.catalog.storage import FIX_PROGRESS_PATH


def print_notice(notice: GateNotice) -> None:
    stream = sys.stderr if notice.level == "error" else sys.stdout
    print(notice.message, file=stream)


def make_client() -> LocalAccessStoreClient:
    return LocalAccessStoreClient(SessionLocal, subscriber_watch_hub)


# =============================================================================
# ACCESS
# =============================================================================

async def subscribe(email: str) -> bool:
    gate = AccessGate(make_client(), notify=print_notice)
    gate.open_email_check()
    await gate.set_email(email)
    if gate.is_unlocked:
        print(f"Welcome back, {email}. All 101 fixes are unlocked.")
        return True
    return await gate.submit()


async def has_access(email: str) -> bool:
    """Run the gate's live check once for a returning visitor."""
    gate = AccessGate(make_client(), notify=print_notice)
    gate.open_email_check()
    await gate.set_email(email)
    unlocked = gate.is_unlocked
    gate.navigate_home()
    return unlocked


async def request_sheet(email: str):
    return await SheetShortcut(make_client(), notify=print_notice).request_sheet(email)


async def apply(args) -> str:
    return await make_client().submit_application(
        name=args.name,
        brand=args.brand,
        store_url=args.store_url,
        monthly_ad_spend=args.ad_spend,
        email=args.email,
    )


# =============================================================================
# CATALOG
# =============================================================================

def print_fix_line(engine: CatalogEngine, fix) -> None:
    progress = engine.effective_progress(fix.id)
    print(f"#{fix.id:>3}  [{fix.difficulty.value:<10}] [{fix.channel.value:<12}] [{progress.value:<11}] {fix.problem}")


def print_stats(engine: CatalogEngine) -> None:
    stats = engine.stats
    print(f"{stats.completed_count}/{stats.total} completed ({stats.completion_percent}%)")
    for difficulty in Difficulty:
        print(f"  {difficulty.short_name.capitalize()}: {stats.completed_by_difficulty[difficulty]}")
    print(f"Done {stats.completed_count} | In Progress {stats.in_progress_count} | Pending {stats.pending_count}")


def run_catalog_command(args) -> int:
    engine = CatalogEngine(JsonFileProgressStorage(args.progress_file))

    if args.command == "list":
        engine.update_filters(
            search_term=args.search,
            difficulty=args.difficulty,
            channel=args.channel,
            progress=args.progress,
        )
        fixes = engine.filter()
        for fix in fixes:
            print_fix_line(engine, fix)
        print(f"{len(fixes)} fixes found")

    elif args.command == "show":
        fix = engine.fix(args.fix_id)
        print_fix_line(engine, fix)
        print(f"\nProblem:  {fix.problem}\nSolution: {fix.solution}\nExample:  {fix.example}")

    elif args.command == "set":
        engine.set_progress(args.fix_id, args.progress)
        print(f"Fix #{args.fix_id} marked {args.progress}")
        print_stats(engine)

    elif args.command == "stats":
        print_stats(engine)

    return 0


# =============================================================================
# CLI
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="browse_fixes", description="101 Fixes terminal client")
    parser.add_argument(
        "--progress-file",
        default=FIX_PROGRESS_PATH,
        help="Where fix progress is kept on this machine",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    subscribe_cmd = commands.add_parser("subscribe", help="Unlock the fixes with an email")
    subscribe_cmd.add_argument("email")

    sheet_cmd = commands.add_parser("sheet", help="Get the link to the shared fixes sheet")
    sheet_cmd.add_argument("email")

    apply_cmd = commands.add_parser("apply", help="Apply for a free audit")
    apply_cmd.add_argument("--name", required=True)
    apply_cmd.add_argument("--brand", required=True)
    apply_cmd.add_argument("--store-url", required=True)
    apply_cmd.add_argument("--ad-spend", required=True, choices=[s.value for s in MonthlyAdSpend])
    apply_cmd.add_argument("--email", required=True)

    list_cmd = commands.add_parser("list", help="List fixes matching the filters")
    list_cmd.add_argument("--email", required=True)
    list_cmd.add_argument("--search", default="")
    list_cmd.add_argument("--difficulty", default=ALL, choices=[ALL] + [d.value for d in Difficulty])
    list_cmd.add_argument("--channel", default=ALL, choices=[ALL] + [c.value for c in Channel])
    list_cmd.add_argument("--progress", default=ALL, choices=[ALL] + [p.value for p in Progress])

    show_cmd = commands.add_parser("show", help="Show one fix in full")
    show_cmd.add_argument("--email", required=True)
    show_cmd.add_argument("fix_id", type=int)

    set_cmd = commands.add_parser("set", help="Record progress on a fix")
    set_cmd.add_argument("--email", required=True)
    set_cmd.add_argument("fix_id", type=int)
    set_cmd.add_argument("progress", choices=[p.value for p in Progress])

    stats_cmd = commands.add_parser("stats", help="Show progress totals")
    stats_cmd.add_argument("--email", required=True)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    init_db()

    try:
        if args.command == "subscribe":
            return 0 if asyncio.run(subscribe(args.email)) else 1

        if args.command == "sheet":
            url = asyncio.run(request_sheet(args.email))
            if url is None:
                return 1
            print(url)
            return 0

        if args.command == "apply":
            application_id = asyncio.run(apply(args))
            print(f"Application submitted! We'll be in touch soon. (id {application_id})")
            return 0

        if not asyncio.run(has_access(args.email)):
            print(f"{args.email} has no access yet. Run: browse_fixes subscribe {args.email}", file=sys.stderr)
            return 1
    except AccessStoreError as e:
        print(f"Something went wrong. Please try again. ({e})", file=sys.stderr)
        return 1

    try:
        return run_catalog_command(args)
    except UnknownFixError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
