# run.py

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()   # Charge les variables depuis .env

from rich import print
from rich.markup import escape
from trip_planner.ai import gemini
from trip_planner.core.budget import format_currency, summarize_budget
from trip_planner.core.errors import ItineraryGenerationError
from trip_planner.core.extractor import extract_itinerary
from trip_planner.core.models import ItineraryResponse, TripRequest


def _parse_args(argv=None):
    p = argparse.ArgumentParser(description="Generate a day-by-day itinerary with Gemini.")
    p.add_argument("--dest", "--destination", dest="destination", required=True)
    p.add_argument("--days", type=int, required=True)
    p.add_argument("--interests", required=True)
    p.add_argument("--budget", type=float)
    p.add_argument("--budget-currency", choices=["Rp", "$"], default="Rp")
    p.add_argument("--markdown", help="parse a saved markdown response instead of calling Gemini")
    return p.parse_args(argv)


def _print_itinerary(result: ItineraryResponse, req: TripRequest) -> None:
    summary = summarize_budget(result.itinerary, req.budget, req.duration, req.budget_symbol)
    sym = summary.currency_symbol

    if not result.itinerary:
        print("[bold red]No day could be read from the response.[/]")

    for d in result.itinerary:
        print(f"\n[bold yellow]Day {d.day} - {escape(d.location or 'Unknown Location')}[/]")
        if not d.activities:
            print("  [dim]No activities planned for this day.[/]")
        for a in d.activities:
            print(f"  [bold]{escape(a.name)}[/]")
            print(f"    Hours          : {escape(a.hours)}")
            print(f"    Estimated cost : {escape(a.estimated_cost)}")
            if a.description:
                print(f"    {escape(a.description)}")

    if result.source_urls:
        print("\n[bold cyan]Sources:[/]")
        for s in result.source_urls:
            print(f"  - {escape(s.title or s.uri)} ({escape(s.uri)})")

    print("\n[bold green]Budget summary[/]")
    print(f"  Estimated total : {format_currency(summary.estimated_total, sym)}")
    print(f"  Actual/fallback : {format_currency(summary.actual_total, sym)}")
    budget_txt = (
        format_currency(summary.total_budget, summary.budget_symbol)
        if summary.total_budget is not None else "not set"
    )
    print(f"  My budget       : {budget_txt}")
    colour = "red" if summary.over_budget else "green"
    print(f"  Daily remaining : [{colour}]{format_currency(summary.daily_remaining, sym)} / day[/]")


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

    req = TripRequest(
        destination=args.destination,
        duration=args.days,
        interests=args.interests,
        budget=args.budget,
        budget_symbol=args.budget_currency,
    )

    try:
        if args.markdown:
            with open(args.markdown, encoding="utf-8") as f:
                result = ItineraryResponse(itinerary=extract_itinerary(f.read()))
        else:
            print("[bold cyan]→ Generating itinerary with Gemini…[/]")
            result = gemini.generate_itinerary(req)
    except ItineraryGenerationError as e:
        print(f"[bold red]{escape(e.message)}[/]")
        if e.details:
            print(f"[red]{escape(e.details)}[/]")
        return 1
    except OSError as e:
        print(f"[bold red]Cannot read {escape(args.markdown or '')}:[/] [red]{escape(str(e))}[/]")
        return 1

    _print_itinerary(result, req)
    return 0


if __name__ == "__main__":
    sys.exit(main())
