"""Rate Catalog Schema - immutable models for deterministic fare calculation."""

from enum import Enum
from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field


class BodyType(str, Enum):
    """Vehicle body type.

    Body type drives the local drop base fee, hourly fallbacks,
    hill-station charges and the interstate permit column.

    Attributes:
        HATCHBACK: Small cars (Swift, Indica)
        SEDAN: Sedans (Dzire, Etios)
        SUV: 7-seaters (Ertiga, Innova)
        VAN: Tempo travellers and buses
        TRUCK: Goods carriers (Tata Ace); permits fall back to the Van fee
    """
    HATCHBACK = "Hatchback"
    SEDAN = "Sedan"
    SUV = "SUV"
    VAN = "Van"
    TRUCK = "Truck"


class FareMode(str, Enum):
    """Trip mode used to pick the pricing rule.

    Attributes:
        DISTANCE: Point-to-point metered distance
        HOURLY: Hourly hire or capped local package (e.g. 8 Hr / 80 Km)
        OUTSTATION: Outstation round trip with per-day minimum distance
        DROP: One-way drop (local or outstation)
        PACKAGE: Fixed package price
        FIXED: Fixed package price
        CUSTOM: Free-text line items
    """
    DISTANCE = "distance"
    HOURLY = "hourly"
    OUTSTATION = "outstation"
    DROP = "drop"
    PACKAGE = "package"
    FIXED = "fixed"
    CUSTOM = "custom"


class AllowanceMode(str, Enum):
    """Driver allowance (batta) multiplier override."""
    AUTO = "auto"
    SINGLE = "single"
    DOUBLE = "double"


class Advisory(str, Enum):
    """Reason code attached to a fare breakdown.

    Display text is kept out of the pricing core; see
    cabfare.config.messages.ADVISORY_MESSAGES.
    """
    NONE = "none"
    MINIMUM_PACKAGE_APPLIED = "minimum_package_applied"
    DROP_BILLED_AS_ROUND_TRIP = "drop_billed_as_round_trip"
    HILL_STATION_ROUND_TRIP = "hill_station_round_trip"


class GstType(str, Enum):
    """Inter-state (IGST) or intra-state (CGST + SGST) supply."""
    IGST = "IGST"
    CGST_SGST = "CGST_SGST"


class VehicleClass(BaseModel):
    """A bookable vehicle class with its tariff.

    Attributes:
        id: Catalog identifier (e.g. 'sedan', 'tempo')
        name: Display name
        popular_models: Example models for the class
        drop_rate: One-way rate per km
        round_rate: Round trip rate per km
        seats: Passenger seats
        body_type: Body type used by body-dependent rules
        min_km: Minimum billable km per outstation day
        batta: Driver allowance per day
        night_charge: Default night driving surcharge
        min_local_package: Fixed minimum local package (heavy vehicles only)
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "tempo",
                "name": "Tempo Traveller",
                "popular_models": "Force Traveller",
                "drop_rate": 35,
                "round_rate": 25,
                "seats": 12,
                "body_type": "Van",
                "min_km": 300,
                "batta": 700,
                "night_charge": 400,
                "min_local_package": 3500
            }
        }
    )

    id: str = Field(description="Catalog identifier")
    name: str = Field(description="Display name")
    popular_models: str = Field(default="", description="Example models for the class")
    drop_rate: float = Field(description="One-way rate per km")
    round_rate: float = Field(description="Round trip rate per km")
    seats: int = Field(description="Passenger seats")
    body_type: BodyType = Field(description="Body type")
    min_km: float = Field(description="Minimum billable km per outstation day")
    batta: float = Field(description="Driver allowance per day")
    night_charge: float = Field(description="Default night driving surcharge")
    min_local_package: Optional[float] = Field(None, description="Fixed minimum local package (heavy vehicles)")

    @property
    def is_heavy(self) -> bool:
        """Heavy vehicles (tempo, minibus, bus) carry a fixed local package."""
        return bool(self.min_local_package)


class RateCatalog(BaseModel):
    """Complete, read-only rate catalog.

    Holds the vehicle classes and the interstate permit table for a
    region and tariff year.

    Attributes:
        vehicles: All vehicle classes
        permits: State key -> body type -> flat permit fee (7-day window)
        region: Market the tariff applies to
        version: Tariff version/year
    """
    model_config = ConfigDict(frozen=True)

    vehicles: List[VehicleClass] = Field(default_factory=list, description="All vehicle classes")
    permits: Dict[str, Dict[BodyType, float]] = Field(
        default_factory=dict,
        description="State -> body type -> interstate permit fee"
    )
    region: str = Field(default="Chennai", description="Market region")
    version: str = Field(default="2025", description="Tariff version/year")

    def get_vehicle(self, vehicle_id: Optional[str]) -> Optional[VehicleClass]:
        """Look up a vehicle class by id.

        Args:
            vehicle_id: Catalog identifier

        Returns:
            VehicleClass, or None if the id is unknown
        """
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def get_permit_fee(
        self,
        state: str,
        body_type: BodyType,
        default_fee: float
    ) -> Optional[float]:
        """Look up the interstate permit fee for a state and body type.

        Falls back to the state's Van fee, then to default_fee, when the
        body type is not tabulated for the state.

        Args:
            state: State key (case-insensitive, e.g. 'karnataka')
            body_type: Body type of the vehicle
            default_fee: Fee used when neither column is tabulated

        Returns:
            Permit fee, or None if the state has no permit table
        """
        fees = self.permits.get(state.strip().lower())
        if fees is None:
            return None
        return fees.get(body_type) or fees.get(BodyType.VAN) or default_fee


class GSTBreakdown(BaseModel):
    """GST split for an invoice amount.

    Attributes:
        taxable_amount: Amount GST is charged on
        gst_rate: GST rate in percent (5 or 12)
        cgst: Central GST (intra-state)
        sgst: State GST (intra-state)
        igst: Integrated GST (inter-state)
        total_tax: Sum of the tax components
        total_amount: Taxable amount plus tax
        is_inter_state: Whether supplier and recipient states differ
        type: IGST or CGST_SGST
    """
    taxable_amount: float
    gst_rate: int
    cgst: int = 0
    sgst: int = 0
    igst: int = 0
    total_tax: int = 0
    total_amount: float = 0.0
    is_inter_state: bool = False
    type: GstType = GstType.CGST_SGST


class PermitEstimate(BaseModel):
    """Estimated entry permit for a trip leaving Tamil Nadu."""
    amount: float = Field(description="Estimated permit amount")
    state: str = Field(description="Destination state name")
    description: str = Field(description="Invoice line description")
