"""Shared utility functions — rupee rounding and INR formatting."""

from __future__ import annotations

import math


# ── Rounding ──────────────────────────────────────────────────────────────

def round_rupee(value: float) -> float:
    """Round to the nearest whole rupee, halves rounding up.

    Python's ``round`` sends halves to the even neighbour (``round(2.5) == 2``);
    tax figures round ₹x.50 up, so this uses ``floor(value + 0.5)``.
    """
    return float(math.floor(value + 0.5))


def round_currency(value: float, decimals: int = 2) -> float:
    """Round to *decimals* places (standard banker-friendly rounding)."""
    return round(value, decimals)


# ── Formatting ────────────────────────────────────────────────────────────

def format_inr(amount: float) -> str:
    """Format a whole-rupee amount with Indian digit grouping.

    ``format_inr(148140)`` → ``"₹1,48,140"``; the last three digits form one
    group and every group above it has two.
    """
    rupees = int(round_rupee(abs(amount)))
    digits = str(rupees)
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])
    sign = "-" if amount < 0 and rupees else ""
    return f"{sign}₹{digits}"
