"""
Example data generator for the QuickChart Data Dashboard.

Writes a small synthetic sales CSV for demonstration: twelve months of
orders across regions and products, with a quoted product name that
contains a comma and a handful of blank amounts to show how
non-numeric values are left out of the chart.
"""

import os
import random

REGIONS = ['North', 'South', 'East', 'West']
PRODUCTS = ['Widget', 'Gadget', 'Gizmo, Deluxe', 'Doohickey']
MONTHS = [
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
]


def _quote(text: str) -> str:
    return f'"{text}"' if ',' in text else text


def generate_example_csv(output_dir: str, *, n_rows: int = 120,
                         seed: int = 42) -> str:
    """Generate ``example_sales.csv`` in *output_dir*.

    Returns
    -------
    str
        Path of the written file.
    """
    os.makedirs(output_dir, exist_ok=True)
    rng = random.Random(seed)

    lines = ["Order ID,Month,Region,Product,Units,Sales Amount"]
    for i in range(1, n_rows + 1):
        units = rng.randint(1, 40)
        price = rng.choice([4.99, 12.5, 24.0, 99.95])
        # ~5% of amounts left blank
        amount = "" if rng.random() < 0.05 else f"{units * price:.2f}"
        lines.append(",".join([
            f"ORD-{i:04d}",
            rng.choice(MONTHS),
            rng.choice(REGIONS),
            _quote(rng.choice(PRODUCTS)),
            str(units),
            amount,
        ]))

    path = os.path.join(output_dir, 'example_sales.csv')
    with open(path, 'w', encoding='utf-8', newline='') as fh:
        fh.write("\n".join(lines) + "\n")
    return path
