# src/tcmb_evds/app.py
"""
Application Entry Point - Command Line Interface

This module serves as the composition root for the tcmb-evds command line
tool. It parses arguments into validated domain values, builds the request
and either prints it (url) or sends it and writes the body to stdout (fetch).

Exit codes: 0 success, 1 transport failure, 2 invalid input.

Files that USE this module:
- tcmb_evds.__main__ (python -m tcmb_evds)
- the tcmb-evds console script
- tests.test_app (unit tests)

Files that this module USES:
- tcmb_evds.shared.logging_conf (setup_logging for logging configuration)
- tcmb_evds.config (settings for defaults)
- tcmb_evds.domain.* (value objects built from arguments)
- tcmb_evds.application.request_builder (RequestBuilder)
- tcmb_evds.adapters.transport (RequestsTransport for fetch)
- tcmb_evds.adapters.formatting (text output)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command line parsing
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import List, Optional, Sequence  # Type hints

from tcmb_evds.adapters.formatting import format_error, format_request, format_url
from tcmb_evds.adapters.transport import RequestsTransport
from tcmb_evds.application.request_builder import RequestBuilder
from tcmb_evds.config import settings
from tcmb_evds.domain.access import AccessConfig
from tcmb_evds.domain.advanced import AdvancedQueryOptions
from tcmb_evds.domain.currency import CurrencyCodeSet, ExchangeDirection, LegacyCutoffPolicy
from tcmb_evds.domain.dates import DateSelector
from tcmb_evds.domain.errors import EvdsError, TransportError
from tcmb_evds.domain.series import CurrencySeries, MultipleCurrencySeries, RawSeries
from tcmb_evds.shared.logging_conf import setup_logging

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TRANSPORT_ERROR = 1
EXIT_INVALID_INPUT = 2

DIRECTIONS = {
    "buying": ExchangeDirection.BUYING,
    "selling": ExchangeDirection.SELLING,
    "both": ExchangeDirection.BOTH,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tcmb-evds",
        description="Build and send validated requests to the CBRT EVDS web service.",
    )
    parser.add_argument("--key", help="EVDS API key (default: EVDS_API_KEY)")
    parser.add_argument("--format", dest="return_format", help="json, xml or csv (default: EVDS_RETURN_FORMAT)")
    parser.add_argument("--base-url", help="Service root (default: EVDS_BASE_URL)")
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL)")

    commands = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("url", "print the request without sending it"),
        ("fetch", "send the request and write the response body to stdout"),
    ):
        sub = commands.add_parser(name, help=help_text)
        target = sub.add_mutually_exclusive_group(required=True)
        target.add_argument("--series", help='raw series code, e.g. "TP.DK.USD.A-TP.DK.EUR.A"')
        target.add_argument(
            "--currency", action="append", metavar="CODE",
            help="currency code; repeat for a multiple currency request",
        )
        sub.add_argument("--dates", required=True, help='"DD-MM-YYYY" or "DD-MM-YYYY, DD-MM-YYYY"')
        sub.add_argument("--direction", choices=sorted(DIRECTIONS), default="both")
        sub.add_argument("--ytl", action="store_true", help="request pre-2005 YTL series")
        sub.add_argument("--frequency", help="advanced: frequency name or code")
        sub.add_argument("--aggregation", help="advanced: aggregation name or code")
        sub.add_argument("--formula", help="advanced: formula name or code")
        if name == "url":
            sub.add_argument("--verbose", action="store_true", help="list parameters line by line")
            sub.add_argument("--reveal-key", action="store_true", help="print the API key unmasked")
    return parser


def _advanced_options(args: argparse.Namespace) -> Optional[AdvancedQueryOptions]:
    if args.frequency is None and args.aggregation is None and args.formula is None:
        return None
    if args.frequency is None:
        raise argparse.ArgumentTypeError("--frequency is required with --aggregation/--formula")
    kwargs = {"frequency": args.frequency}
    if args.aggregation is not None:
        kwargs["aggregation"] = args.aggregation
    if args.formula is not None:
        kwargs["formula"] = args.formula
    return AdvancedQueryOptions(**kwargs)


def build_request(args: argparse.Namespace) -> RequestBuilder:
    """
    Turn parsed arguments into a request.

    Raises:
        EvdsError: If any argument fails domain validation
    """
    access = AccessConfig(
        token=args.key if args.key is not None else settings.api_key,
        return_format=args.return_format or settings.return_format,
    )
    dates = DateSelector.parse(args.dates)
    advanced = _advanced_options(args)

    if args.series is not None:
        return RequestBuilder.build(access, RawSeries(args.series), dates, advanced)

    direction = DIRECTIONS[args.direction]
    policy = LegacyCutoffPolicy.parse(settings.legacy_cutoff_policy)
    currencies: List[str] = args.currency
    if len(currencies) == 1:
        series = CurrencySeries(direction, currencies[0], dates, args.ytl, policy)
    else:
        series = MultipleCurrencySeries(direction, CurrencyCodeSet(currencies), dates, args.ytl, policy)
    return RequestBuilder.for_currency(access, series, advanced)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command line tool.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=(args.log_level or settings.log_level).upper(),
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    base_url = args.base_url or settings.base_url
    try:
        request = build_request(args)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except EvdsError as e:
        print(format_error(e), file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.command == "url":
        if args.verbose:
            print(format_request(request, base_url))
        else:
            print(format_url(request, base_url, reveal_key=args.reveal_key))
        return EXIT_OK

    try:
        body = RequestsTransport(base_url=base_url).send(request)
    except TransportError as e:
        print(format_error(e), file=sys.stderr)
        return EXIT_TRANSPORT_ERROR

    sys.stdout.buffer.write(body)
    sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
