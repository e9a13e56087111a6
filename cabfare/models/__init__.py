"""Data models for the fare engine."""

from cabfare.models.schema import (
    BodyType,
    FareMode,
    AllowanceMode,
    Advisory,
    GstType,
    VehicleClass,
    RateCatalog,
    GSTBreakdown,
    PermitEstimate,
)
from cabfare.models.trip_models import (
    ExtraItem,
    TripBase,
    DistanceTrip,
    DropTrip,
    OutstationTrip,
    HourlyTrip,
    FixedTrip,
    CustomTrip,
    TripParameters,
    FareBreakdown,
    parse_trip,
)

__all__ = [
    # Catalog models
    "BodyType",
    "FareMode",
    "AllowanceMode",
    "Advisory",
    "GstType",
    "VehicleClass",
    "RateCatalog",
    "GSTBreakdown",
    "PermitEstimate",
    # Trip models
    "ExtraItem",
    "TripBase",
    "DistanceTrip",
    "DropTrip",
    "OutstationTrip",
    "HourlyTrip",
    "FixedTrip",
    "CustomTrip",
    "TripParameters",
    "FareBreakdown",
    "parse_trip",
]
