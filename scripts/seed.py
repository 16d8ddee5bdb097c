"""
Seed the Pre-IPO SIP database.

Usage:
    python scripts/seed.py                               # development DB, all seeders
    python scripts/seed.py --env production              # prod-safe seeders only
    python scripts/seed.py --only foundation ledger_accounts
    python scripts/seed.py --with-test-data              # force test data on

This script is idempotent; safe to run multiple times. A full run exits 1
when post-seed validation fails.
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from app.core.exceptions import SeedError
from app.seeders import seed_all, seeder_names


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed reference and test data")
    parser.add_argument("--env", default="development", help="App environment")
    parser.add_argument("--only", nargs="+", choices=seeder_names(), metavar="NAME",
                        help="Run only these seeders (in registry order)")
    parser.add_argument("--with-test-data", action="store_true", default=None,
                        help="Seed test users and investments regardless of SEED_TEST_DATA")
    args = parser.parse_args(argv)

    os.environ.setdefault("APP_ENV", args.env)
    app = create_app(args.env)

    with app.app_context():
        print("=" * 60)
        print(f"  SEED: Pre-IPO SIP ({args.env})")
        print("=" * 60)

        try:
            report = seed_all(allow_test_data=args.with_test_data, only=args.only)
        except SeedError as e:
            print(f"\n❌ {e}")
            return 1

        for result in report.results:
            if result.skipped:
                print(f"  ⏭  {result.name}: skipped (test data)")
                continue
            stats = result.stats
            print(f"  ✅ {result.name}: {stats.total_created} created, "
                  f"{stats.total_updated} updated ({result.duration_ms}ms)")
            for step, error in stats.failures:
                print(f"     ⚠️  {step}: {error}")

        failed = report.validation_failures
        print("\n" + "=" * 60)
        if failed:
            for message in failed:
                print(f"  ❌ {message}")
        elif args.only:
            print(f"  ✅ Partial seed complete in {report.duration_ms}ms")
        else:
            print(f"  ✅ Seed complete in {report.duration_ms}ms; validation passed")
        print("=" * 60)
        return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
