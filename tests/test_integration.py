"""Integration tests for end-to-end workflows."""

import json

from ledgerbook.cli.main import cli


def test_full_workflow(cli_runner, temp_db):
    """Test complete workflow: business → chart → invoices → entries → reports."""
    db_args = ["--db-path", temp_db.database_path]

    # Step 1: Create business and seed the chart
    result = cli_runner.invoke(cli, [*db_args, "business", "create", "Corner Bakery"])
    assert result.exit_code == 0
    business_id = None
    for line in result.output.split("\n"):
        if "ID:" in line:
            # Extract ID from output like "Created business 'Corner Bakery' (ID: 1)"
            business_id = line.split("ID:")[1].strip().rstrip(")")
            break
    assert business_id is not None

    result = cli_runner.invoke(cli, [*db_args, "init-chart"])
    assert result.exit_code == 0

    # Step 2: Owner contribution in February
    result = cli_runner.invoke(
        cli,
        [
            *db_args,
            "entry",
            "add",
            "--business",
            business_id,
            "--date",
            "2024-02-01",
            "--description",
            "Owner contribution",
            "--debit",
            "1010=2000",
            "--credit",
            "3100=2000",
        ],
    )
    assert result.exit_code == 0

    # Step 3: A posted sale and a posted purchase in March
    for args in (
        ["--type", "sale", "--number", "F001-1", "--party", "Acme Foods", "--subtotal", "1000"],
        ["--type", "purchase", "--number", "P-1", "--party", "Mill Co", "--subtotal", "400"],
    ):
        result = cli_runner.invoke(
            cli,
            [
                *db_args,
                "invoice",
                "add",
                "--business",
                "Corner Bakery",
                "--date",
                "2024-03-10",
                *args,
                "--post",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Posted as entry" in result.output

    # Step 4: Rent paid in cash
    result = cli_runner.invoke(
        cli,
        [
            *db_args,
            "entry",
            "add",
            "--business",
            business_id,
            "--date",
            "2024-03-20",
            "--description",
            "March rent",
            "--debit",
            "6100=300",
            "--credit",
            "1010=300",
        ],
    )
    assert result.exit_code == 0

    march = ["--start-date", "2024-03-01", "--end-date", "2024-03-31"]

    # Step 5: Income statement only sees March activity
    result = cli_runner.invoke(
        cli, [*db_args, "report", "income-statement", *march, "--json"]
    )
    assert result.exit_code == 0
    statement = json.loads(result.output)
    assert statement["total_income"] == "1000.00"
    assert statement["total_expenses"] == "700.00"
    assert statement["net_income"] == "300.00"
    assert [g["category"] for g in statement["expenses"]] == ["Cost of Sales", "Operating Expenses"]

    # Step 6: Balance sheet carries the February contribution
    result = cli_runner.invoke(cli, [*db_args, "report", "balance-sheet", *march, "--json"])
    assert result.exit_code == 0
    sheet = json.loads(result.output)
    # Cash 1700 + receivable 1180 + tax credit 72
    assert sheet["total_assets"] == "2952.00"
    # Payable 472 + taxes payable 180
    assert sheet["total_liabilities"] == "652.00"
    assert sheet["total_equity"] == "2000.00"
    # Net income is not closed into equity
    assert sheet["balanced"] is False

    # Step 7: Ledger for cash shows the running balance across periods
    result = cli_runner.invoke(
        cli, [*db_args, "report", "ledger", "--account", "1010", *march, "--json"]
    )
    assert result.exit_code == 0
    ledger = json.loads(result.output)
    (cash,) = ledger["accounts"]
    assert [row["running_balance"] for row in cash["rows"]] == ["2000.00", "1700.00"]
    assert cash["final_balance"] == "1700.00"

    # Step 8: Entry listing shows every entry balanced
    result = cli_runner.invoke(cli, [*db_args, "entry", "list", "--period", "all", "--json"])
    assert result.exit_code == 0
    listings = json.loads(result.output)
    assert len(listings) == 4
    assert all(item["balanced"] for item in listings)
