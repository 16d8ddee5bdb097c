"""
``flask seed`` command group.
"""

from app.models.ledger import LedgerAccount


class TestSeedCli:
    def test_list(self, cli_runner):
        result = cli_runner.invoke(args=["seed", "list"])
        assert result.exit_code == 0
        assert " 1. foundation" in result.output
        assert "user_investments  (test data)" in result.output

    def test_run(self, cli_runner):
        result = cli_runner.invoke(args=["seed", "run", "ledger_accounts"])
        assert result.exit_code == 0
        assert "ledger_accounts: 17 created, 0 updated" in result.output
        assert LedgerAccount.query.count() == 17

    def test_run_unknown(self, cli_runner):
        result = cli_runner.invoke(args=["seed", "run", "nope"])
        assert result.exit_code == 1
        assert "Unknown seeder" in result.output

    def test_run_test_seeder_without_test_data(self, cli_runner):
        result = cli_runner.invoke(args=["seed", "run", "user_lifecycle", "--no-test-data"])
        assert result.exit_code == 1
        assert "SEED_TEST_DATA" in result.output

    def test_all_then_validate(self, cli_runner):
        result = cli_runner.invoke(args=["seed", "all", "--no-test-data"])
        assert result.exit_code == 0
        assert "user_lifecycle: skipped" in result.output
        assert "Done in" in result.output

        result = cli_runner.invoke(args=["seed", "validate", "--no-test-data"])
        assert result.exit_code == 0
        assert result.output.startswith("OK")

    def test_validate_empty_fails(self, cli_runner):
        result = cli_runner.invoke(args=["seed", "validate", "--no-test-data"])
        assert result.exit_code == 1
