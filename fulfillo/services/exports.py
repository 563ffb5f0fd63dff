"""
Manifest Exports

CSV export of the shipping queue and plain-text print manifests.
"""

from datetime import date
from typing import Iterable, List

import polars as pl

from fulfillo.domain.enums import ShippingView
from fulfillo.domain.models import OrderView


MANIFEST_COLUMNS: List[str] = [
    "Order ID",
    "Brand",
    "Customer",
    "Carrier",
    "Tracking",
    "Status",
    "Date",
]


def manifest_frame(orders: Iterable[OrderView]) -> pl.DataFrame:
    """Tabular manifest, one row per order"""
    rows = [
        (
            o.id,
            o.brand,
            o.customer,
            o.carrier or "Pending",
            o.tracking or "N/A",
            o.status.value,
            o.created.isoformat(),
        )
        for o in orders
    ]
    return pl.DataFrame(
        rows,
        schema={column: pl.Utf8 for column in MANIFEST_COLUMNS},
        orient="row",
    )


def manifest_csv(orders: Iterable[OrderView]) -> str:
    """Comma-separated manifest with a header row"""
    return manifest_frame(orders).write_csv()


def manifest_filename(view: ShippingView, today: date) -> str:
    return f"fulfillo_{view.value.lower()}_{today.isoformat()}.csv"


def render_print_manifest(orders: Iterable[OrderView]) -> str:
    """Label blocks for physical printing, separated by form feeds"""
    blocks = []
    for o in orders:
        lines = [
            "FULFILLO - LABELS & MANIFEST",
            f"Brand: {o.brand}",
            f"Status: {o.status.value}",
            "Recipient:",
            f"  {o.customer}",
        ]
        if o.address:
            lines.append(f"  {o.address}")
        lines.append(f"  {o.city or '-'}, KSA")
        if o.phone:
            lines.append(f"  {o.phone}")
        lines.extend([
            f"Carrier: {o.carrier or 'Pending'}",
            f"Tracking: {o.tracking or 'N/A'}",
            f"Fulfillo ID: {o.id}",
        ])
        blocks.append("\n".join(lines))
    return "\n\f\n".join(blocks)
