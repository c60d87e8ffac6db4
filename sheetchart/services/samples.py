from __future__ import annotations

from datetime import date, timedelta
from enum import Enum
from typing import Any

import numpy as np
import pandas as pd

from ..models.record import RawGrid

"""Sample dataset generation for demos and tests.

Generates synthetic sheets shaped like common dashboard sources (sales,
web analytics, finance, e-commerce, social media). Output is a list of row
dicts with the same columns a real sheet of that kind would have; numeric
columns mix real numbers with fixed-precision text, as sheets often do.

Generation is reproducible: the same kind, rows, seed and start date always
give the same data.
"""

__all__ = [
    "SampleKind",
    "generate_sample_data",
    "to_csv",
    "to_grid",
]

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class SampleKind(Enum):
    SALES = "sales"
    ANALYTICS = "analytics"
    FINANCE = "finance"
    ECOMMERCE = "ecommerce"
    SOCIAL = "social"


def _dates(rows: int, start: date | None) -> list[str]:
    if start is None:
        start = date.today() - timedelta(days=rows)
    return [(start + timedelta(days=i)).isoformat() for i in range(rows)]


def _sales(rng: np.random.Generator, rows: int, start: date | None) -> list[dict[str, Any]]:
    products = ["Laptop", "Desktop", "Tablet", "Phone", "Headphones"]
    regions = ["North", "South", "East", "West", "Central"]
    sales = rng.integers(1000, 6000, rows)
    revenue = rng.integers(10000, 60000, rows)
    units = rng.integers(10, 110, rows)
    margin = rng.uniform(0.1, 0.4, rows)
    return [
        {
            "Date": d,
            "Product": products[i % len(products)],
            "Region": regions[i % len(regions)],
            "Sales": int(sales[i]),
            "Revenue": int(revenue[i]),
            "Units": int(units[i]),
            "Profit Margin": f"{margin[i]:.2f}",
        }
        for i, d in enumerate(_dates(rows, start))
    ]


def _analytics(rng: np.random.Generator, rows: int, start: date | None) -> list[dict[str, Any]]:
    sources = ["Organic", "Direct", "Social", "Email", "Paid"]
    devices = ["Desktop", "Mobile", "Tablet"]
    sessions = rng.integers(1000, 11000, rows)
    pages_per_session = rng.uniform(1, 4, rows)
    bounce = rng.uniform(0.2, 0.8, rows)
    duration = rng.uniform(60, 360, rows)
    conversion = rng.uniform(0, 1, rows)
    return [
        {
            "Date": d,
            "Source": sources[i % len(sources)],
            "Device": devices[i % len(devices)],
            "Sessions": int(sessions[i]),
            "Pageviews": int(sessions[i] * pages_per_session[i]),
            "Bounce Rate": f"{bounce[i] * 100:.1f}",
            "Avg Session Duration": f"{duration[i]:.0f}",
            "Conversions": int(sessions[i] * 0.02 * conversion[i] + 1),
        }
        for i, d in enumerate(_dates(rows, start))
    ]


def _finance(rng: np.random.Generator, rows: int, start: date | None) -> list[dict[str, Any]]:
    revenue = 100000.0
    expenses = 70000.0
    data: list[dict[str, Any]] = []
    for i in range(rows):
        # 成長率 + ばらつき
        revenue *= 1 + rng.uniform(-0.05, 0.15)
        expenses *= 1 + rng.uniform(-0.03, 0.12)
        profit = revenue - expenses
        data.append({
            "Month": MONTHS[i % 12],
            "Revenue": int(revenue),
            "Expenses": int(expenses),
            "Profit": int(profit),
            "Profit Margin": f"{profit / revenue * 100:.1f}",
            "Growth Rate": f"{rng.uniform(-0.1, 0.2) * 100:.1f}",
        })
    return data


def _ecommerce(rng: np.random.Generator, rows: int, start: date | None) -> list[dict[str, Any]]:
    categories = ["Electronics", "Clothing", "Home", "Sports", "Books"]
    brands = ["BrandA", "BrandB", "BrandC", "BrandD", "BrandE"]
    price = rng.uniform(20, 520, rows)
    rating = rng.uniform(3, 5, rows)
    orders = rng.integers(10, 1010, rows)
    stock = rng.integers(5, 105, rows)
    returns = rng.uniform(0, 0.1, rows)
    return [
        {
            "Product ID": f"P{1000 + i}",
            "Category": categories[i % len(categories)],
            "Brand": brands[i % len(brands)],
            "Price": f"{price[i]:.2f}",
            "Rating": f"{rating[i]:.1f}",
            "Orders": int(orders[i]),
            "Revenue": f"{price[i] * orders[i]:.2f}",
            "Stock Level": int(stock[i]),
            "Return Rate": f"{returns[i]:.3f}",
        }
        for i in range(rows)
    ]


def _social(rng: np.random.Generator, rows: int, start: date | None) -> list[dict[str, Any]]:
    platforms = ["Facebook", "Instagram", "Twitter", "LinkedIn", "TikTok"]
    content_types = ["Photo", "Video", "Article", "Story", "Live"]
    followers = rng.integers(1000, 101000, rows)
    engagement = rng.uniform(0.01, 0.11, rows)
    noise = rng.uniform(0, 1, (rows, 3))
    reach = rng.uniform(0.5, 2.5, rows)
    data: list[dict[str, Any]] = []
    for i, d in enumerate(_dates(rows, start)):
        f = int(followers[i])
        e = float(engagement[i])
        data.append({
            "Date": d,
            "Platform": platforms[i % len(platforms)],
            "Content Type": content_types[i % len(content_types)],
            "Followers": f,
            "Likes": int(f * e * noise[i, 0]),
            "Shares": int(f * e * 0.1 * noise[i, 1]),
            "Comments": int(f * e * 0.05 * noise[i, 2]),
            "Engagement Rate": f"{e * 100:.2f}",
            "Reach": int(f * reach[i]),
        })
    return data


_GENERATORS = {
    SampleKind.SALES: _sales,
    SampleKind.ANALYTICS: _analytics,
    SampleKind.FINANCE: _finance,
    SampleKind.ECOMMERCE: _ecommerce,
    SampleKind.SOCIAL: _social,
}

_DEFAULT_ROWS = {
    SampleKind.SALES: 30,
    SampleKind.ANALYTICS: 30,
    SampleKind.FINANCE: 12,
    SampleKind.ECOMMERCE: 50,
    SampleKind.SOCIAL: 30,
}


def generate_sample_data(
    kind: SampleKind | str,
    rows: int | None = None,
    seed: int = 42,
    start: date | None = None,
) -> list[dict[str, Any]]:
    """Generate a synthetic dataset of the given kind.

    Args:
        kind: Dataset kind (SampleKind or its value, e.g. "sales")
        rows: Number of rows (kind-specific default when None)
        seed: Random seed for reproducible data
        start: First date for dated kinds (default: ``rows`` days before today)

    Returns:
        List of row dicts in column order
    """
    kind = SampleKind(kind)
    if rows is None:
        rows = _DEFAULT_ROWS[kind]
    if rows < 0:
        raise ValueError("rows must not be negative")
    rng = np.random.default_rng(seed)
    return _GENERATORS[kind](rng, rows, start)


def to_csv(rows: list[dict[str, Any]]) -> str:
    """Render generated rows as CSV text (header line first)."""
    if not rows:
        return ""
    return pd.DataFrame(rows).to_csv(index=False, lineterminator="\n")


def to_grid(rows: list[dict[str, Any]]) -> RawGrid:
    """Render generated rows as a RawGrid of text cells."""
    if not rows:
        return []
    headers = list(rows[0])
    return [headers] + [[str(row.get(h, "")) for h in headers] for row in rows]
