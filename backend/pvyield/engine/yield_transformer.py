"""
Rescale and reshape a PVWatts hourly simulation.

The upstream model runs at a 1 kW reference system. Every power-valued series
is rescaled as `value * capacity_kw / 1000`; irradiance series (solrad) and the
capacity factor are passed through. The hourly year is then reshaped into a
first-day view and a daily-average view made of fixed 24-hour windows that
ignore calendar months and leap years.
"""

import math
from typing import Sequence

import numpy as np
from pydantic import ValidationError

from pvyield.config import DAYS_PER_YEAR, HOURS_PER_DAY, REFERENCE_CAPACITY_DIVISOR
from pvyield.errors import MalformedResponse
from pvyield.models.geocode import Coordinates
from pvyield.models.solar_yield import (
    AnnualSummary,
    DailyAverage,
    HourlyPoint,
    MonthlySeries,
    PVWattsResponse,
    YieldBundle,
)


def validate_capacity(capacity_kw: float) -> float:
    """Zero is a valid degenerate capacity; negative or non-finite is not."""
    if not math.isfinite(capacity_kw):
        raise ValueError(f"Capacity must be finite, got {capacity_kw}")
    if capacity_kw < 0:
        raise ValueError(f"Capacity must be >= 0 kW, got {capacity_kw}")
    return float(capacity_kw)


def rescale(series: Sequence[float], capacity_kw: float) -> np.ndarray:
    """Linear rescale of a reference power series to the requested capacity."""
    values = np.asarray(series, dtype=float)
    return values * capacity_kw / REFERENCE_CAPACITY_DIVISOR


def rescale_scalar(value: float, capacity_kw: float) -> float:
    return value * capacity_kw / REFERENCE_CAPACITY_DIVISOR


def first_day(hourly: Sequence[float]) -> list[HourlyPoint]:
    """The first 24 hours of the year (fewer if the series is shorter)."""
    return [
        HourlyPoint(hour=i, power_kw=float(p))
        for i, p in enumerate(hourly[:HOURS_PER_DAY])
    ]


def daily_averages(
    hourly: Sequence[float],
    days: int = DAYS_PER_YEAR,
    window: int = HOURS_PER_DAY,
) -> list[DailyAverage]:
    """
    Average each fixed `window`-hour block of the hourly series.

    Day d (1-based) covers hours (d-1)*window .. d*window-1. A trailing block
    shorter than `window` is averaged over the hours it has; blocks past the
    end of the series are not emitted. Hours beyond days*window are ignored.
    """
    values = np.asarray(hourly, dtype=float)
    result = []
    for day in range(days):
        start = day * window
        block = values[start:start + window]
        if block.size == 0:
            break
        result.append(DailyAverage(day=day + 1, avg_power_kw=float(block.mean())))
    return result


def parse_pvwatts(payload: dict) -> PVWattsResponse:
    """
    Validate the raw upstream body.

    Raises:
        MalformedResponse: missing/mistyped fields, or PVWatts reported errors.
    """
    if not isinstance(payload, dict):
        raise MalformedResponse("PVWatts payload is not a JSON object")
    try:
        parsed = PVWattsResponse.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponse(
            f"PVWatts payload failed validation ({e.error_count()} errors)"
        ) from e
    if parsed.errors:
        raise MalformedResponse(f"PVWatts reported errors: {'; '.join(parsed.errors)}")
    return parsed


def build_yield_bundle(
    payload: dict,
    coordinates: Coordinates,
    capacity_kw: float,
) -> YieldBundle:
    """
    Turn a PVWatts payload into the full set of rescaled views.

    Pure: the same payload and capacity always give the same bundle.

    Raises:
        MalformedResponse: if the payload cannot be interpreted.
        ValueError: if capacity_kw is negative or not finite.
    """
    capacity_kw = validate_capacity(capacity_kw)
    outputs = parse_pvwatts(payload).outputs

    hourly = rescale(outputs.ac, capacity_kw)

    monthly = MonthlySeries(
        ac=rescale(outputs.ac_monthly, capacity_kw).tolist(),
        poa=rescale(outputs.poa_monthly, capacity_kw).tolist(),
        solrad=list(outputs.solrad_monthly),
        dc=rescale(outputs.dc_monthly, capacity_kw).tolist(),
    )
    annual = AnnualSummary(
        ac_annual=rescale_scalar(outputs.ac_annual, capacity_kw),
        solrad_annual=outputs.solrad_annual,
        capacity_factor=outputs.capacity_factor,
    )

    hourly_list = hourly.tolist()
    return YieldBundle(
        coordinates=coordinates,
        capacity_kw=capacity_kw,
        hourly=hourly_list,
        first_day=first_day(hourly_list),
        monthly=monthly,
        annual=annual,
        daily_averages=daily_averages(hourly),
    )
