"""
Usage Examples for SuperSaver POS
Demonstrates configuring a terminal, billing and revenue reports
"""

from datetime import date
from pathlib import Path

from supersaver_pos.config import ConfigLoader, ConfigValidator, PosConfig
from supersaver_pos.models import Bill
from supersaver_pos.receipts import RevenueAggregator
from supersaver_pos.services import PosSession


DATA_DIR = Path(__file__).parent / "data"


# =============================================================================
# Example 1: File-based Configuration
# =============================================================================

def file_config_example() -> PosConfig:
    """Load configuration from JSON file, paths relative to the file"""
    loader = ConfigLoader()
    return loader.load(file=DATA_DIR / "pos_config.json", env=False)


# =============================================================================
# Example 2: Merged Configuration (File + Environment + Programmatic)
# =============================================================================

def merged_config_example() -> PosConfig:
    """
    Merge configuration from multiple sources
    Priority: programmatic > environment (POS_*) > file
    """
    loader = ConfigLoader()
    return loader.load(
        file=DATA_DIR / "pos_config.json",
        env=True,
        config={
            "discount_policy": "clamp",
        },
    )


# =============================================================================
# Example 3: Billing without the interactive menu
# =============================================================================

def billing_example(config: PosConfig) -> None:
    """Build a bill, park it, retrieve it and finalize it"""
    session = PosSession.from_config(config)

    bill = Bill(cashier_name="Nimali", branch="Kandy", customer_name="")
    bill.add_item(session.lookup("A1"))
    bill.add_item(session.lookup("A1"))
    bill.add_item(session.lookup("C2"))

    bill_id = session.save_pending(bill)
    print(f"Parked bill {bill_id} for {bill.customer_name}")

    for summary in session.list_pending():
        print(f"  ID: {summary.bill_id} | Customer: {summary.customer_name} | Total: {summary.total:.2f}")

    bill = session.retrieve_pending(bill_id)
    bill.add_item(session.lookup("D2"))
    path = bill.finalize(Path(config.receipts_dir) / f"{config.receipt_prefix}{bill_id}.txt")
    print(f"Receipt written to {path}")


# =============================================================================
# Example 4: Revenue Report
# =============================================================================

def revenue_example(config: PosConfig) -> None:
    """Aggregate this year's receipts"""
    aggregator = RevenueAggregator.from_config(config)
    today = date.today()
    summary, path = aggregator.generate_report(date(today.year, 1, 1), today)

    print(f"Total revenue: {summary.total_revenue:.2f} from {summary.receipt_count} receipt(s)")
    for skipped in summary.skipped:
        print(f"  skipped {skipped.file_name}: {skipped.reason}")
    print(f"Report written to {path}")


# =============================================================================
# Example 5: Configuration Validation
# =============================================================================

def validation_example() -> None:
    """Validate configuration before use"""
    validator = ConfigValidator()

    result = validator.validate({
        "max_discount": 120,
        "discount_policy": "round",
    })

    if not result.valid:
        print("Configuration validation failed:")
        for error in result.errors:
            print(f"  - {error.field}: {error.message}")


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    print("=== SuperSaver POS Examples ===\n")

    config = file_config_example()
    print(f"1. File config: catalog={config.catalog_path}")
    print(f"2. Merged config: discount_policy={merged_config_example().discount_policy.value}\n")

    print("3. Billing:")
    billing_example(config)
    print()

    print("4. Revenue Report:")
    revenue_example(config)
    print()

    print("5. Configuration Validation:")
    validation_example()
