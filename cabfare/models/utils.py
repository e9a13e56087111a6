"""Utility functions for applying tariff rules to vehicle classes."""

import math

from cabfare.config.settings import Settings
from cabfare.models.schema import BodyType, FareMode, VehicleClass


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves rounding up.

    Python's built-in round() uses banker's rounding (2.5 -> 2), which
    under-bills every other half rupee.

    Args:
        value: Amount to round

    Returns:
        Rounded whole amount
    """
    return int(math.floor(value + 0.5))


def select_rate(rate_per_km: float, vehicle: VehicleClass, mode: FareMode) -> float:
    """Pick the per-km rate for a trip.

    An explicit rate above zero always wins; otherwise outstation trips
    use the round trip rate and everything else the drop rate.

    Args:
        rate_per_km: Rate entered by the caller (0 = catalog default)
        vehicle: Resolved vehicle class
        mode: Effective trip mode

    Returns:
        Rate per km
    """
    if rate_per_km and rate_per_km > 0:
        return rate_per_km
    if mode == FareMode.OUTSTATION:
        return vehicle.round_rate
    return vehicle.drop_rate


def is_large_vehicle(vehicle: VehicleClass, settings: Settings) -> bool:
    """Vehicles with more than seven seats (tempo, buses)."""
    return vehicle.seats > settings.large_vehicle_seats


def local_drop_base_fee(vehicle: VehicleClass, settings: Settings) -> float:
    """Base fee covering the first kilometres of a local drop."""
    if vehicle.body_type in (BodyType.SUV, BodyType.VAN):
        return settings.local_drop_base_fee_large
    return settings.local_drop_base_fee


def waiting_rate(vehicle: VehicleClass, settings: Settings) -> float:
    """Hourly waiting rate: 100/hr for cars up to 300/hr for buses."""
    if is_large_vehicle(vehicle, settings):
        return settings.waiting_rate_large
    return settings.waiting_rate


def hill_station_charge(vehicle: VehicleClass, settings: Settings) -> float:
    """Flat hill station charge, tiered by vehicle size."""
    if is_large_vehicle(vehicle, settings):
        return settings.hill_station_charge_large
    if vehicle.body_type == BodyType.SUV:
        return settings.hill_station_charge_suv
    return settings.hill_station_charge


def default_hourly_rate(vehicle: VehicleClass, settings: Settings) -> float:
    if vehicle.body_type == BodyType.SUV:
        return settings.hourly_rate_suv
    return settings.hourly_rate


def hourly_minimum_charge(duration_hours: float, vehicle: VehicleClass, settings: Settings) -> float:
    """Minimum charge for hourly hire without a package.

    Tiers are checked in order; the first tier whose hour limit covers the
    duration sets the minimum. Longer hires have no minimum.

    Args:
        duration_hours: Hours of hire
        vehicle: Resolved vehicle class
        settings: Settings holding the (max hours, SUV minimum, other minimum) tiers

    Returns:
        Minimum charge, or 0 if no tier applies
    """
    is_suv = vehicle.body_type == BodyType.SUV
    for max_hours, suv_minimum, other_minimum in settings.hourly_minimum_tiers:
        if duration_hours <= max_hours:
            return suv_minimum if is_suv else other_minimum
    return 0.0
