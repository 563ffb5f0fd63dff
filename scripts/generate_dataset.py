"""
Demo Dataset Export

Generates a synthetic dashboard dataset and writes brands, inventory, orders
and customers as CSV files.

Usage:
    python scripts/generate_dataset.py --orders 500 --brands 6 --seed 7
"""

import argparse
from pathlib import Path

import polars as pl

from fulfillo.config.logging import configure_logging, get_logger
from fulfillo.data import DemoDataGenerator

OUTPUT_DIR = Path(__file__).parent.parent / "data" / "generated"

logger = get_logger(__name__)


def _frame(records) -> pl.DataFrame:
    return pl.DataFrame([r.model_dump(mode="json") for r in records])


def export(store, output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    tables = {
        "brands": _frame(store.brands).drop("brand_password"),
        "inventory": _frame(store.inventory_views()),
        "orders": _frame(store.order_views()),
        "customers": _frame(store.customers),
    }
    for name, df in tables.items():
        path = output_dir / f"{name}.csv"
        df.write_csv(path)
        logger.info("Wrote table", table=name, rows=df.height, path=str(path))


def main():
    parser = argparse.ArgumentParser(description="Generate a Fulfillo demo dataset")
    parser.add_argument("--orders", type=int, default=200)
    parser.add_argument("--brands", type=int, default=5)
    parser.add_argument("--customers", type=int, default=50)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR)
    args = parser.parse_args()

    configure_logging()
    store = DemoDataGenerator(seed=args.seed).build_store(
        brands=args.brands,
        orders=args.orders,
        customers=args.customers,
    )
    export(store, args.output)


if __name__ == "__main__":
    main()
