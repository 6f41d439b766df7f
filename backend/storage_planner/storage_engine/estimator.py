"""
Storage requirement estimate for a year of film output.

Each minute of finished runtime consumes a fixed amount of storage that
depends on the resolution class it is mastered in:

  - standard (HD):     7 GB per hour  ->  7/60 GB per minute
  - high-res (4K):    16 GB per hour  -> 16/60 GB per minute

The high-res share is given as a percentage of total runtime; the rest is
standard resolution.

Inputs are expected to be validated by the caller.  Out-of-range values
raise ``ValueError`` rather than being clamped here.
"""

from __future__ import annotations

from storage_planner.models.schemas import StorageEstimate

STANDARD_GB_PER_MINUTE = 7 / 60
HIGH_RES_GB_PER_MINUTE = 16 / 60


def estimate(
    films_per_year: float,
    minutes_per_film: float,
    high_res_percent: float,
    *,
    standard_rate: float = STANDARD_GB_PER_MINUTE,
    high_res_rate: float = HIGH_RES_GB_PER_MINUTE,
) -> StorageEstimate:
    """Estimate yearly storage, split by resolution class.

    Args:
        films_per_year: Number of films produced per year (>= 0).
        minutes_per_film: Average runtime per film in minutes (>= 0).
        high_res_percent: Share of runtime mastered in 4K, 0-100.
        standard_rate: GB per minute for standard-resolution runtime.
        high_res_rate: GB per minute for high-resolution runtime.

    Returns:
        StorageEstimate with total, standard and high-res GB.
    """
    # written as "not >= " so NaN is rejected too
    if not films_per_year >= 0:
        raise ValueError(f"films_per_year must be >= 0, got {films_per_year}")
    if not minutes_per_film >= 0:
        raise ValueError(f"minutes_per_film must be >= 0, got {minutes_per_film}")
    if not 0 <= high_res_percent <= 100:
        raise ValueError(
            f"high_res_percent must be within [0, 100], got {high_res_percent}"
        )
    if not (standard_rate >= 0 and high_res_rate >= 0):
        raise ValueError("storage rates must be >= 0")

    total_minutes = films_per_year * minutes_per_film
    high_res_fraction = high_res_percent / 100
    standard_fraction = 1 - high_res_fraction

    standard_gb = total_minutes * standard_fraction * standard_rate
    high_res_gb = total_minutes * high_res_fraction * high_res_rate

    return StorageEstimate(
        total_gb=standard_gb + high_res_gb,
        standard_gb=standard_gb,
        high_res_gb=high_res_gb,
    )
