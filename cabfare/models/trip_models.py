"""Trip parameter and fare breakdown models.

Trip parameters form a discriminated union on ``mode``: each trip mode
only accepts the fields it prices, so a package price on a drop trip is
rejected at validation time instead of being silently ignored.
"""

from typing import Annotated, Any, List, Literal, Mapping, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from cabfare.models.schema import Advisory, AllowanceMode, FareMode


class ExtraItem(BaseModel):
    """Free-text line item for custom trips."""
    description: str = Field(default="", description="Line item description")
    amount: float = Field(default=0.0, description="Line item amount")


class TripBase(BaseModel):
    """Fields shared by every trip mode.

    Attributes:
        start_km: Odometer reading at start
        end_km: Odometer reading at end
        vehicle_id: Catalog vehicle id; unknown ids yield an empty breakdown
        rate_per_km: Explicit rate override (0 uses the catalog rate)
        days: Trip length in days
        toll: Toll paid (tax exempt)
        parking: Parking paid (tax exempt)
        permit: Manually entered permit amount (tax exempt)
        gst_enabled: Whether GST is charged
        waiting_hours: Hours the driver waited
        is_hill_station: Hill station trip
        pet_charge: Pet transport
        night_bata: Manual night allowance amount
        night_stay: Night stay passthrough amount
        is_night_drive: Add the vehicle's night charge when no manual amount is set
        interstate_state: Destination state key for the automatic permit
        include_garage_buffer: Add shed-to-pickup dead mileage on round trips
        manual_bata_mode: Driver allowance multiplier override
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    start_km: float = Field(description="Odometer reading at start")
    end_km: float = Field(description="Odometer reading at end")
    vehicle_id: Optional[str] = Field(None, description="Catalog vehicle id")
    rate_per_km: float = Field(default=0.0, description="Explicit rate per km (0 = catalog default)")
    days: int = Field(default=1, description="Trip length in days")
    toll: float = Field(default=0.0)
    parking: float = Field(default=0.0)
    permit: float = Field(default=0.0)
    gst_enabled: bool = Field(default=False)
    waiting_hours: float = Field(default=0.0)
    is_hill_station: bool = Field(default=False)
    pet_charge: bool = Field(default=False)
    night_bata: float = Field(default=0.0, description="Manual night allowance amount")
    night_stay: float = Field(default=0.0)
    is_night_drive: bool = Field(default=False)
    interstate_state: Optional[str] = Field(None, description="Destination state key, e.g. 'karnataka'")
    include_garage_buffer: bool = Field(default=False)
    manual_bata_mode: AllowanceMode = Field(default=AllowanceMode.AUTO)


class DistanceTrip(TripBase):
    """Point-to-point metered trip."""
    mode: Literal["distance"] = "distance"


class DropTrip(TripBase):
    """One-way drop."""
    mode: Literal["drop"] = "drop"


class OutstationTrip(TripBase):
    """Outstation round trip."""
    mode: Literal["outstation"] = "outstation"


class HourlyTrip(TripBase):
    """Hourly hire or capped local package.

    With a package price, hours and kilometres beyond the included
    allowance are billed extra. Without one, the duration is billed at
    the hourly rate subject to tiered minimums.
    """
    mode: Literal["hourly"] = "hourly"
    hourly_rate: float = Field(default=0.0, description="Rate per hour")
    duration_hours: float = Field(default=0.0, description="Actual hours used")
    package_price: float = Field(default=0.0, description="Local package price")
    included_km: Optional[float] = Field(None, description="Kilometres included in the package")
    included_hours: Optional[float] = Field(None, description="Hours included in the package")
    extra_hour_rate: float = Field(default=0.0, description="Rate per hour beyond the package")


class FixedTrip(TripBase):
    """Fixed price package (airport transfer, temple tour, ...)."""
    mode: Literal["fixed", "package"] = "fixed"
    package_price: float = Field(default=0.0)


class CustomTrip(TripBase):
    """Trip billed from free-text line items."""
    mode: Literal["custom"] = "custom"
    extra_items: List[ExtraItem] = Field(default_factory=list)


TripParameters = Annotated[
    Union[DistanceTrip, DropTrip, OutstationTrip, HourlyTrip, FixedTrip, CustomTrip],
    Field(discriminator="mode"),
]

_trip_adapter = TypeAdapter(TripParameters)


def parse_trip(data: Mapping[str, Any]) -> TripParameters:
    """Validate a plain mapping into the trip model for its mode.

    Args:
        data: Mapping with a 'mode' key and the fields of that mode

    Returns:
        The matching trip model

    Raises:
        pydantic.ValidationError: If the mode is unknown or a field does not
            belong to the mode
    """
    return _trip_adapter.validate_python(dict(data))


class FareBreakdown(BaseModel):
    """Itemized fare for one trip.

    Currency amounts are rounded to whole units except driver_batta and
    rate_used, which are kept as computed.

    Attributes:
        total: Grand total payable
        gst: GST amount
        fare: Total before GST
        distance: Raw distance (doubled for hill station drops)
        effective_distance: Billed distance
        rate_used: Rate per km actually applied
        distance_charge: Charge for distance, package or line items
        driver_batta: Driver allowance
        waiting_charges: Waiting charge
        hill_station_charges: Hill station charge
        pet_charges: Pet transport charge
        taxable_total: Taxable subtotal
        exempt_total: Toll, parking and permits
        mode: Effective trip mode
        night_bata: Night allowance applied
        night_stay: Night stay passthrough
        advisory: Reason code for any rule that overrode the request
    """
    total: float = 0
    gst: float = 0
    fare: float = 0
    distance: float = 0
    effective_distance: float = 0
    rate_used: float = 0
    distance_charge: float = 0
    driver_batta: float = 0
    waiting_charges: float = 0
    hill_station_charges: float = 0
    pet_charges: float = 0
    taxable_total: float = 0
    exempt_total: float = 0
    mode: FareMode
    night_bata: float = 0
    night_stay: float = 0
    advisory: Advisory = Advisory.NONE

    @classmethod
    def empty(cls, mode: FareMode) -> "FareBreakdown":
        """Zeroed breakdown returned when no vehicle could be resolved."""
        return cls(mode=mode)

    @property
    def is_empty(self) -> bool:
        """True for the zeroed breakdown of an unresolved vehicle."""
        return self.distance_charge == 0 and self.rate_used == 0 and self.total == 0
