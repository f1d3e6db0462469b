"""Channel assumptions — one immutable record per go-to-market channel."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChannelParameters(BaseModel):
    """Lead funnel, unit economics, and cost base for one channel.

    Every field has a default so that a partial mapping (e.g. from a YAML
    table or an API override) always produces a complete record.
    """

    model_config = ConfigDict(frozen=True)

    # --- Lead funnel ---
    leads_per_month: float = Field(
        default=0.0, ge=0,
        description="Leads generated per month at full ramp. For contractor "
                    "channels this is leads per contractor.",
    )
    is_contractor: bool = Field(
        default=False,
        description="If True, leads_per_month is multiplied by contractor_count.",
    )
    contractor_count: float = Field(
        default=0.0, ge=0,
        description="Number of contractors feeding leads (contractor channels only).",
    )
    conversion_rate: float = Field(
        default=0.0, ge=0,
        description="Lead → customer conversion in PERCENT (20 = 20%).",
    )

    # --- Unit economics ---
    unit_margin: float = Field(default=0.0, description="Gross margin per customer")
    cac: float = Field(default=0.0, description="Customer acquisition cost per customer")

    # --- Cost base ---
    opex_monthly: float = Field(default=0.0, ge=0, description="Fixed operating cost per month")
    setup_costs: float = Field(default=0.0, ge=0, description="One-off launch cost")

    # --- Timing ---
    ramp_months: int = Field(
        default=4,
        description="Months to reach full lead volume (linear ramp). Values below 1 are treated as 1.",
    )
    revenue_delay: int = Field(
        default=2,
        description="Months between acquiring a customer and realising its "
                    "margin and CAC. Negative values are treated as 0.",
    )
    time_horizon: int = Field(default=18, ge=1, description="Projection horizon (months)")

    @field_validator("ramp_months")
    @classmethod
    def _clamp_ramp(cls, v: int) -> int:
        return max(1, v)

    @field_validator("revenue_delay")
    @classmethod
    def _clamp_delay(cls, v: int) -> int:
        return max(0, v)

    @property
    def conversion_fraction(self) -> float:
        """conversion_rate as a 0–1 fraction."""
        return self.conversion_rate / 100

    @property
    def effective_leads(self) -> float:
        """Monthly lead volume at full ramp, after the contractor multiplier."""
        if self.is_contractor:
            return self.leads_per_month * self.contractor_count
        return self.leads_per_month
