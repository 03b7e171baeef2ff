#!/usr/bin/env python3
"""
Command line entry point.

Usage:
    checkout-scraper --url https://www.etsy.com/c/clothing --count 3 --headless
"""

import argparse
import asyncio
import random
import sys

from checkout_scraper.core.config import OUTPUT_FORMATS, ScraperConfig
from checkout_scraper.core.errors import LaunchError
from checkout_scraper.orchestrator import ScrapeOrchestrator
from checkout_scraper.services.results_writer import write_results
from checkout_scraper.utils.logger_config import setup_logger, set_log_level, log

# Playwright needs the proactor loop on Windows
if sys.platform == 'win32':
    asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())

logger = setup_logger('main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='checkout-scraper',
        description='Scrape a listing page, add its products to the cart and check out the last one.',
    )
    parser.add_argument('--url', help='Listing page URL')
    parser.add_argument('--count', type=int, help='Number of listing cards to visit')
    headless = parser.add_mutually_exclusive_group()
    headless.add_argument('--headless', dest='headless', action='store_true', default=None,
                          help='Run without a visible browser window')
    headless.add_argument('--headed', dest='headless', action='store_false',
                          help='Run with a visible browser window')
    parser.add_argument('--output', dest='output_path', help='Result file path (default: result.json)')
    parser.add_argument('--output-format', choices=OUTPUT_FORMATS,
                        help='json overwrites an array, jsonl appends one line per run')
    parser.add_argument('--seed', type=int, help='Seed for the random pointer moves and option picks')
    parser.add_argument('--log-level', help='DEBUG, INFO, WARNING or ERROR')
    return parser


async def scrape(config: ScraperConfig):
    """Run the pipeline and write the results file"""
    rng = random.Random(config.seed) if config.seed is not None else random.Random()
    orchestrator = ScrapeOrchestrator(rng=rng)

    candidates = await orchestrator.run(config.url, config.count, config.headless)
    path = write_results(candidates, config.output_path, config.output_format)

    log(logger, 'info', f"====== RESULTS WRITTEN ! ======= ({path})", 'MAIN', 'OUTPUT')
    return candidates


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ScraperConfig.from_env(**vars(args))
    except ValueError as e:
        log(logger, 'error', f"Invalid configuration: {e}", 'MAIN', 'CONFIG')
        return 2

    set_log_level(config.log_level)
    log(logger, 'info', f"Starting run: url={config.url} count={config.count} headless={config.headless}",
        'MAIN', 'CONFIG')

    try:
        asyncio.run(scrape(config))
    except LaunchError as e:
        log(logger, 'critical', f"Could not start the browser: {e}", 'MAIN', 'LAUNCH')
        return 1
    except OSError as e:
        log(logger, 'error', f"Could not write results: {e}", 'MAIN', 'OUTPUT')
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
