#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from appchains import AppChains, AppChainsError, ResultType


def _print_report(client: AppChains, args: argparse.Namespace) -> int:
    report = client.get_report(args.app_code, args.data_source_id, timeout=args.timeout)
    print(f"succeeded: {report.succeeded}")

    output = Path(args.output)
    for result in report:
        if result.value.kind is ResultType.TEXT:
            print(f"{result.name}: {result.value.data}")
        else:
            path = result.value.save_to(output)
            print(f"{result.name}: saved {path}")
    return 0 if report.succeeded else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Request an AppChains report or query a beacon")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    report_parser = sub.add_parser("report", help="run an app and print its report")
    report_parser.add_argument("app_code", help="application code, e.g. Chain9")
    report_parser.add_argument("data_source_id", help="identifier of the input data file")
    report_parser.add_argument("--output", default=".", help="directory for downloaded report files")
    report_parser.add_argument("--timeout", type=float, default=None, help="give up after this many seconds")

    beacon_parser = sub.add_parser("beacon", help="query a beacon endpoint")
    beacon_parser.add_argument("chrom", type=int)
    beacon_parser.add_argument("pos", type=int)
    beacon_parser.add_argument("allele")
    beacon_parser.add_argument("--public", action="store_true", help="use the public beacons endpoint")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        with AppChains.from_env() as client:
            if args.command == "report":
                return _print_report(client, args)
            if args.public:
                print(client.get_public_beacon(args.chrom, args.pos, args.allele))
            else:
                print(client.get_sequencing_beacon(args.chrom, args.pos, args.allele))
            return 0
    except AppChainsError as exc:
        logging.getLogger("fetch_report").error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
