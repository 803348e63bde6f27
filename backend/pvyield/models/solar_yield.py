"""
Pydantic models for solar yield requests, upstream PVWatts payloads and the
reshaped output bundle.
"""

from pydantic import BaseModel, Field

from pvyield.models.geocode import Coordinates


class SolarYieldInput(BaseModel):
    """Form input: where the system is and how big it is."""

    postal_code: str = Field(..., min_length=1, examples=["400001"])
    country_code: str = Field(..., min_length=1, examples=["IN"])
    capacity_kw: float = Field(
        ...,
        ge=0.0,
        allow_inf_nan=False,
        description="Nominal system capacity in kW. Zero yields an all-zero result.",
        examples=[1000.0],
    )


class NRELProxyInput(BaseModel):
    """Body accepted by the NREL proxy endpoint."""

    lat: float = Field(..., allow_inf_nan=False)
    long: float = Field(..., allow_inf_nan=False)


# ---------------------------------------------------------------------------
# Upstream payload
# ---------------------------------------------------------------------------

class PVWattsOutputs(BaseModel):
    """The subset of PVWatts `outputs` consumed by the transformer."""

    ac: list[float]                 # hourly AC output, W at the reference system
    ac_monthly: list[float]
    poa_monthly: list[float]
    solrad_monthly: list[float]     # irradiance, never rescaled
    dc_monthly: list[float]
    ac_annual: float
    solrad_annual: float
    capacity_factor: float


class PVWattsResponse(BaseModel):
    outputs: PVWattsOutputs
    errors: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Output bundle
# ---------------------------------------------------------------------------

class HourlyPoint(BaseModel):
    """One hour of the first-day view."""
    hour: int          # 0-23
    power_kw: float


class DailyAverage(BaseModel):
    """Mean output over one fixed 24-hour window."""
    day: int           # 1-365
    avg_power_kw: float


class MonthlySeries(BaseModel):
    ac: list[float]
    poa: list[float]
    solrad: list[float]
    dc: list[float]


class AnnualSummary(BaseModel):
    ac_annual: float
    solrad_annual: float
    capacity_factor: float  # %


class YieldBundle(BaseModel):
    """All views of one simulated year, rescaled to the requested capacity."""
    coordinates: Coordinates
    capacity_kw: float
    hourly: list[float]              # 8760 values, index = hour of year
    first_day: list[HourlyPoint]     # hours 0-23 of `hourly`
    monthly: MonthlySeries
    annual: AnnualSummary
    daily_averages: list[DailyAverage]
