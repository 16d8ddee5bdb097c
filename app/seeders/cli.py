"""
``flask seed`` command group.

    flask seed list
    flask seed run foundation
    flask seed all --no-test-data
    flask seed validate
"""

import click
from flask.cli import AppGroup

from app.core.exceptions import SeedError

seed_cli = AppGroup("seed", help="Populate the database with reference and test data.")


@seed_cli.command("list")
def list_cmd():
    """Print the seeders in run order."""
    from app.seeders import SEEDERS

    for i, module in enumerate(SEEDERS, start=1):
        tag = "" if module.PROD_SAFE else "  (test data)"
        click.echo(f"{i:>2}. {module.NAME}{tag}")


@seed_cli.command("run")
@click.argument("name")
@click.option("--with-test-data/--no-test-data", default=None,
              help="Override SEED_TEST_DATA for this run.")
def run_cmd(name, with_test_data):
    """Run a single seeder by name."""
    from app.seeders import run_seeder

    try:
        stats = run_seeder(name, allow_test_data=with_test_data)
    except SeedError as e:
        raise click.ClickException(str(e))
    click.echo(f"{name}: {stats.total_created} created, {stats.total_updated} updated")
    for step, error in stats.failures:
        click.echo(f"  failed step {step}: {error}", err=True)


@seed_cli.command("all")
@click.option("--with-test-data/--no-test-data", default=None,
              help="Override SEED_TEST_DATA for this run.")
def all_cmd(with_test_data):
    """Run every seeder in order."""
    from app.seeders import seed_all

    try:
        report = seed_all(allow_test_data=with_test_data)
    except SeedError as e:
        raise click.ClickException(str(e))
    for result in report.results:
        if result.skipped:
            click.echo(f"{result.name}: skipped")
        else:
            click.echo(
                f"{result.name}: {result.stats.total_created} created, "
                f"{result.stats.total_updated} updated ({result.duration_ms}ms)"
            )
    for seeder, step, error in report.failures:
        click.echo(f"  {seeder}: failed step {step}: {error}", err=True)
    for message in report.validation_failures:
        click.echo(f"  validation: {message}", err=True)
    click.echo(f"Done in {report.duration_ms}ms")


@seed_cli.command("validate")
@click.option("--with-test-data/--no-test-data", default=None,
              help="Include the minimums that only hold when test data was seeded.")
def validate_cmd(with_test_data):
    """Check seeded row counts and inventory; exit 1 on any failure."""
    from app.seeders import validate_seed

    results = validate_seed(with_test_data=with_test_data)
    failed = [r for r in results if not r.passed]
    for r in failed:
        click.echo(f"FAIL {r.message}", err=True)
    if failed:
        raise click.ClickException(f"{len(failed)} of {len(results)} checks failed")
    click.echo(f"OK ({len(results)} checks)")
