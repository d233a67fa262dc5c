"""Command-line entry point: resolve a growth assumption, run the projection,
write the yearly timeline to CSV."""

from __future__ import annotations

import argparse
from datetime import timedelta
import logging
import sys

from config.jurisdiction import default_jurisdiction, load_jurisdiction
from config.settings import Settings, load_settings
from errors import ConfigurationError, InsufficientData, InvalidInput, RentBuyError
from growth.cache import load_growth_rates
from growth.providers import fetch_region_growth
from growth.suburbs import suburb_growth_rate
from mortgage.models import ScenarioInputs
from projection.logic import DEFAULT_HORIZON_YEARS, DEFAULT_SUMMARY_YEARS, compute_comparison

logger = logging.getLogger("rentbuy")

SCENARIO_FIELDS = {
    "five": "five_year",
    "ten": "ten_year",
    "fifteen": "fifteen_year",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Project buying against renting and investing the deposit.")
    parser.add_argument("--price", type=float, required=True)
    parser.add_argument("--deposit", type=float, required=True)
    parser.add_argument("--weekly-rent", type=float, required=True)
    parser.add_argument("--income", type=float, default=0.0)
    parser.add_argument("--rate", type=float, default=None, help="annual interest rate, e.g. 0.065")
    parser.add_argument("--term", type=int, default=None, help="loan term in years")
    parser.add_argument("--first-home", action="store_true")
    parser.add_argument("--scheme", action="store_true", help="use the government deposit scheme")
    parser.add_argument("--horizon", type=int, default=DEFAULT_HORIZON_YEARS)
    parser.add_argument("--jurisdiction", default=None, help="path to a jurisdiction JSON table")

    growth = parser.add_mutually_exclusive_group()
    growth.add_argument("--growth-rate", type=float, default=None)
    growth.add_argument("--suburb", default=None)
    growth.add_argument("--abs-region", default=None, help="e.g. Brisbane, Sydney")
    parser.add_argument("--dwelling", choices=["house", "unit", "all"], default="house")
    parser.add_argument("--scenario", choices=sorted(SCENARIO_FIELDS), default="ten")
    parser.add_argument("--refresh", action="store_true", help="bypass the growth cache")

    parser.add_argument("--output", default="rent_vs_buy_timeline.csv")
    return parser


def resolve_growth_rate(args: argparse.Namespace, settings: Settings, weights: tuple[float, float]) -> float | None:
    if args.growth_rate is not None:
        return args.growth_rate
    if args.suburb:
        return suburb_growth_rate(args.suburb, args.dwelling, weights)
    if args.abs_region:
        lookup = load_growth_rates(
            lambda: fetch_region_growth(
                args.abs_region,
                weights=weights,
                base_url=settings.abs_base_url,
                timeout=settings.http_timeout,
            ),
            cache_path=settings.cache_file,
            max_age=timedelta(days=settings.cache_max_age_days),
            force=args.refresh,
        )
        if lookup.stale:
            logger.warning(lookup.error)
        scenarios = {
            "house": lookup.data.houses,
            "unit": lookup.data.units,
            "all": lookup.data.all_residential,
        }[args.dwelling]
        return getattr(scenarios, SCENARIO_FIELDS[args.scenario])
    return None


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("%s", exc)
        return 2
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_jurisdiction(args.jurisdiction) if args.jurisdiction else default_jurisdiction()
        growth_rate = resolve_growth_rate(args, settings, config.dwelling_mix)
        inputs = ScenarioInputs(
            property_price=args.price,
            deposit=args.deposit,
            is_first_home_buyer=args.first_home,
            use_government_scheme=args.scheme,
            annual_income=args.income,
            annual_interest_rate=args.rate if args.rate is not None else config.loan.interest_rate,
            loan_term_years=args.term if args.term is not None else config.loan.loan_term_years,
            weekly_rent=args.weekly_rent,
            property_growth_rate=growth_rate,
        )
        summary_years = tuple(year for year in DEFAULT_SUMMARY_YEARS if year <= args.horizon)
        result = compute_comparison(inputs, args.horizon, config=config, summary_years=summary_years)
    except InvalidInput as exc:
        logger.error("Invalid input: %s", exc)
        return 2
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    except InsufficientData as exc:
        logger.error("Not enough price history: %s", exc)
        return 1
    except (RentBuyError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1

    try:
        result.to_frame().to_csv(args.output, index=False)
    except OSError as exc:
        logger.error("Could not write timeline to %s: %s", args.output, exc)
        return 1
    logger.info("Timeline written to %s", args.output)
    logger.info(
        "Break-even year: %s; final advantage: %s by %.0f",
        result.summary.break_even_year or "none",
        result.summary.final.advantage,
        result.summary.final.advantage_amount,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
