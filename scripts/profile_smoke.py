#!/usr/bin/env python3
import argparse
import json
from pathlib import Path

from profile_hub.client.api_client import DEFAULT_BASE_URL, ProfileApiClient
from profile_hub.core.logging import configure_logging
from profile_hub.smoke import (
    DEFAULT_EMAIL,
    DEFAULT_PASSWORD,
    SmokeContext,
    default_steps,
    report_lines,
    run_steps,
)


def _print_report(report, steps) -> None:
    for line in report_lines(report, steps):
        print(line)


def main() -> int:
    parser = argparse.ArgumentParser(description='Smoke test for the profile API')
    parser.add_argument('--base-url', default=DEFAULT_BASE_URL)
    parser.add_argument('--email', default=DEFAULT_EMAIL)
    parser.add_argument('--password', default=DEFAULT_PASSWORD)
    parser.add_argument('--output', default='reports/profile_smoke.json')
    parser.add_argument('--log-level', default='WARNING')
    args = parser.parse_args()

    configure_logging(args.log_level)

    client = ProfileApiClient(base_url=args.base_url)
    steps = default_steps()
    report = run_steps(steps, SmokeContext(client=client, email=args.email, password=args.password))
    _print_report(report, steps)

    if args.output:
        output_path = Path(args.output)
        if not output_path.is_absolute():
            output_path = Path(__file__).resolve().parents[1] / output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, ensure_ascii=False, indent=2, default=str)

    summary = report.to_dict()
    print(f"Total: {summary['total']}, Passed: {summary['passed']}, Failed: {summary['failed']}, Skipped: {summary['skipped']}")
    return 0 if report.ok else 2


if __name__ == '__main__':
    raise SystemExit(main())
