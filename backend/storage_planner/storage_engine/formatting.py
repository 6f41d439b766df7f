"""Display labels for storage sizes, prices and seat counts."""

from __future__ import annotations

from typing import Union

GB_PER_TB = 1024


def format_storage(gb: float) -> str:
    """Format a GB figure, switching to TB at 1024 GB.

    >>> format_storage(512)
    '512.00 GB'
    >>> format_storage(1228.8)
    '1.20 TB'
    """
    if gb >= GB_PER_TB:
        return f"{gb / GB_PER_TB:.2f} TB"
    return f"{gb:.2f} GB"


def format_cost(amount: float) -> str:
    return f"${amount:,.2f}"


def format_seats(seats: Union[int, str]) -> str:
    if seats == 1:
        return "1 user"
    return f"{seats} users"
