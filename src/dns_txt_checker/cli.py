import argparse
import asyncio
import json
import logging
import sys
from typing import List

import dns.exception

from txtcheck import TXTCheckResult, TXTRecordChecker, __version__
from txtcheck.config import ResolverSettings

"""
The command-line interface for the DNS TXT record checker.

Flow:
  1) Read resolver settings from the environment, then apply CLI overrides
  2) Build the resolver once (failure here is reported before any check)
  3) Run the check and print a single line (or JSON with --json)

Exit codes:
  0 = record found
  1 = record not found
  2 = invalid input, DNS failure, or resolver/configuration failure
"""

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


# Parse the command-line arguments
def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="dns-txt-check",
        description="Check whether a domain publishes an exact TXT record value",
    )
    p.add_argument("-d", "--domain", required=True, metavar="DOMAIN",
                   help="The URL (or domain, with --allow-bare-domain) to check")
    p.add_argument("-r", "--record", required=True, metavar="RECORD",
                   help="The TXT record to look for")
    p.add_argument("--allow-bare-domain", action="store_true", default=None,
                   help="Accept a domain without a URL scheme (e.g. example.com)")

    # Resolver settings: defaults come from TXTCHECK_* environment variables.
    p.add_argument("--nameserver", dest="nameservers", action="append", default=None, metavar="IP",
                   help="Nameserver IP to query (repeatable, default: system resolver)")
    p.add_argument("--port", type=int, default=None, help="Nameserver port (default 53)")
    p.add_argument("--timeout", type=float, default=None, help="Per-server timeout (seconds)")
    p.add_argument("--lifetime", type=float, default=None, help="Total lookup time budget (seconds)")
    p.add_argument("--tcp", action="store_true", default=None, help="Query over TCP")

    p.add_argument("--json", dest="as_json", action="store_true", help="Output JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> ResolverSettings:
    """Environment settings with any explicitly given CLI flags applied on top."""
    settings = ResolverSettings.from_env()
    if args.nameservers:
        settings.nameservers = list(args.nameservers)
    if args.port is not None:
        settings.port = args.port
    if args.timeout is not None:
        settings.timeout = args.timeout
    if args.lifetime is not None:
        settings.lifetime = args.lifetime
    if args.tcp is not None:
        settings.use_tcp = args.tcp
    if args.allow_bare_domain is not None:
        settings.allow_bare_domain = args.allow_bare_domain
    return settings


def print_human(result: TXTCheckResult) -> None:
    if result.error is not None:
        print(result.error.describe())
    elif result.found:
        print("Record found.")
    else:
        print("Record not found.")


def exit_code(result: TXTCheckResult) -> int:
    if result.status == "found":
        return EXIT_FOUND
    if result.status == "not_found":
        return EXIT_NOT_FOUND
    return EXIT_ERROR


def main(argv: List[str] | None = None) -> int:
    """
    CLI entrypoint.

    Returns:
        Process exit code (see module docstring).
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("dns_txt_checker")

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return EXIT_ERROR

    try:
        resolver = settings.build_resolver()
    except (dns.exception.DNSException, ValueError, OSError) as e:
        print(f"Failed to create DNS resolver: {e}")
        return EXIT_ERROR

    log.debug("resolver settings: %s", settings.to_dict())

    checker = TXTRecordChecker(resolver, allow_bare_domain=settings.allow_bare_domain)
    result = asyncio.run(checker.check(args.domain, args.record))

    if result.error is not None:
        log.debug("check failed: %r", result.error.cause or result.error)

    if args.as_json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_human(result)

    return exit_code(result)


if __name__ == "__main__":
    raise SystemExit(main())
