"""Deterministic fare calculator (Chennai standard tariff rules)."""

from typing import Any, Mapping, NamedTuple, Optional, Union

from cabfare.core.catalog_loader import CatalogLoader
from cabfare.config.settings import Settings, get_settings
from cabfare.config.logging_config import get_logger
from cabfare.models.schema import Advisory, AllowanceMode, FareMode, RateCatalog, VehicleClass
from cabfare.models.trip_models import FareBreakdown, TripParameters, parse_trip
from cabfare.models.utils import (
    default_hourly_rate,
    hill_station_charge,
    hourly_minimum_charge,
    local_drop_base_fee,
    round_half_up,
    select_rate,
    waiting_rate,
)

logger = get_logger(__name__)


class DistanceQuote(NamedTuple):
    """Outcome of the mode-specific pricing step."""
    effective_distance: float
    rate: float
    charge: float
    advisory: Advisory = Advisory.NONE


class FareCalculator:
    """Deterministic fare calculator.

    This is the core pricing engine. Given a trip and the rate catalog it:
    - Resolves the vehicle class
    - Computes raw and billable distance per trip mode
    - Applies minimum distance floors and heavy vehicle package rules
    - Adds driver allowance, taxable surcharges and interstate permits
    - Computes GST and the grand total

    The calculator never reads the clock, never mutates the catalog and
    never raises for an unknown vehicle; it returns a zeroed breakdown
    instead.
    """

    def __init__(
        self,
        catalog: Optional[RateCatalog] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize calculator.

        Args:
            catalog: RateCatalog (if None, loads the default catalog)
            settings: Settings holding tariff constants (if None, global settings)
        """
        if catalog is None:
            catalog = CatalogLoader.load_default()

        self.catalog = catalog
        self.settings = settings or get_settings()

    def calculate(self, trip: Union[TripParameters, Mapping[str, Any]]) -> FareBreakdown:
        """Calculate the fare breakdown for a trip.

        Args:
            trip: Trip model, or a mapping validated with parse_trip()

        Returns:
            FareBreakdown. All amounts are zero if the vehicle id is unknown.

        Raises:
            pydantic.ValidationError: If a mapping does not describe a valid trip
        """
        if isinstance(trip, Mapping):
            trip = parse_trip(trip)

        mode = FareMode(trip.mode)

        vehicle = self.catalog.get_vehicle(trip.vehicle_id)
        if vehicle is None:
            logger.warning(f"Vehicle not found in catalog: {trip.vehicle_id!r}")
            return FareBreakdown.empty(mode)

        settings = self.settings
        raw_distance = max(0.0, trip.end_km - trip.start_km)
        hill_advisory = Advisory.NONE

        # Hill station drops are driven back down: bill as a round trip
        if trip.is_hill_station and mode == FareMode.DROP:
            raw_distance *= 2
            mode = FareMode.OUTSTATION
            hill_advisory = Advisory.HILL_STATION_ROUND_TRIP

        effective_distance = raw_distance
        if trip.include_garage_buffer and mode == FareMode.OUTSTATION:
            effective_distance += settings.garage_buffer_km

        rate = select_rate(trip.rate_per_km, vehicle, mode)

        quote = self._price_distance(trip, mode, vehicle, raw_distance, effective_distance, rate)
        advisory = quote.advisory if quote.advisory != Advisory.NONE else hill_advisory

        driver_batta = self._driver_allowance(trip, mode, vehicle, raw_distance, quote.effective_distance)

        # Taxable surcharges
        night_bata = trip.night_bata
        if trip.is_night_drive and night_bata == 0:
            night_bata = vehicle.night_charge
        waiting_charges = trip.waiting_hours * waiting_rate(vehicle, settings)
        hill_charges = hill_station_charge(vehicle, settings) if trip.is_hill_station else 0.0
        pet_charges = settings.pet_charge if trip.pet_charge else 0.0
        surcharges = trip.night_stay + night_bata + waiting_charges + hill_charges + pet_charges

        auto_permit = self._interstate_permit(trip, vehicle)

        taxable = quote.charge + driver_batta + surcharges
        gst = taxable * settings.gst_rate if trip.gst_enabled else 0.0
        exempt = trip.toll + trip.parking + trip.permit + auto_permit

        return FareBreakdown(
            total=round_half_up(taxable + gst + exempt),
            gst=round_half_up(gst),
            fare=round_half_up(taxable + exempt),
            distance=raw_distance,
            effective_distance=quote.effective_distance,
            rate_used=quote.rate,
            distance_charge=round_half_up(quote.charge),
            driver_batta=driver_batta,
            waiting_charges=round_half_up(waiting_charges),
            hill_station_charges=round_half_up(hill_charges),
            pet_charges=round_half_up(pet_charges),
            taxable_total=round_half_up(taxable),
            exempt_total=round_half_up(exempt),
            mode=mode,
            night_bata=round_half_up(night_bata),
            night_stay=round_half_up(trip.night_stay),
            advisory=advisory,
        )

    def _price_distance(
        self,
        trip: TripParameters,
        mode: FareMode,
        vehicle: VehicleClass,
        raw_distance: float,
        effective_distance: float,
        rate: float
    ) -> DistanceQuote:
        """Resolve billable distance and the distance charge for the trip mode."""
        if mode == FareMode.DROP:
            if vehicle.is_heavy:
                return self._price_heavy_drop(trip, vehicle, raw_distance, rate)
            return self._price_light_drop(vehicle, raw_distance, effective_distance, rate)

        if mode == FareMode.OUTSTATION:
            billable = max(vehicle.min_km * trip.days, effective_distance)
            return DistanceQuote(billable, rate, billable * rate)

        if mode == FareMode.HOURLY:
            return self._price_hourly(trip, vehicle, effective_distance, rate)

        if mode in (FareMode.FIXED, FareMode.PACKAGE):
            return DistanceQuote(effective_distance, rate, trip.package_price)

        if mode == FareMode.CUSTOM:
            return DistanceQuote(effective_distance, rate, sum(item.amount for item in trip.extra_items))

        # Metered trips carry no distance charge; only extras reach the total
        return DistanceQuote(effective_distance, rate, 0.0)

    def _price_heavy_drop(
        self,
        trip: TripParameters,
        vehicle: VehicleClass,
        raw_distance: float,
        rate: float
    ) -> DistanceQuote:
        # Tempo/bus: minimum package (5 Hrs / 50 KM) or round trip billing
        if raw_distance <= self.settings.heavy_local_threshold_km:
            return DistanceQuote(
                raw_distance, rate, vehicle.min_local_package, Advisory.MINIMUM_PACKAGE_APPLIED
            )

        billable = max(vehicle.min_km, raw_distance * 2)
        round_rate = trip.rate_per_km if trip.rate_per_km > 0 else vehicle.round_rate
        return DistanceQuote(
            billable, round_rate, billable * round_rate, Advisory.DROP_BILLED_AS_ROUND_TRIP
        )

    def _price_light_drop(
        self,
        vehicle: VehicleClass,
        raw_distance: float,
        effective_distance: float,
        rate: float
    ) -> DistanceQuote:
        settings = self.settings
        if raw_distance <= settings.local_drop_threshold_km:
            extra_km = max(0.0, raw_distance - settings.local_drop_included_km)
            charge = local_drop_base_fee(vehicle, settings) + extra_km * rate
            return DistanceQuote(raw_distance, rate, charge)

        billable = max(settings.outstation_drop_min_km, effective_distance)
        return DistanceQuote(billable, rate, billable * rate)

    def _price_hourly(
        self,
        trip: TripParameters,
        vehicle: VehicleClass,
        effective_distance: float,
        rate: float
    ) -> DistanceQuote:
        settings = self.settings
        if trip.package_price > 0:
            included_hours = (
                trip.included_hours if trip.included_hours is not None
                else settings.package_included_hours
            )
            included_km = (
                trip.included_km if trip.included_km is not None
                else settings.package_included_km
            )
            extra_hour_rate = trip.extra_hour_rate or trip.hourly_rate or settings.package_extra_hour_rate

            charge = trip.package_price
            charge += max(0.0, trip.duration_hours - included_hours) * extra_hour_rate
            if rate > 0:
                charge += max(0.0, effective_distance - included_km) * rate
            return DistanceQuote(effective_distance, rate, charge)

        hourly_rate = trip.hourly_rate or default_hourly_rate(vehicle, settings)
        charge = trip.duration_hours * hourly_rate
        charge = max(charge, hourly_minimum_charge(trip.duration_hours, vehicle, settings))
        return DistanceQuote(effective_distance, rate, charge)

    def _driver_allowance(
        self,
        trip: TripParameters,
        mode: FareMode,
        vehicle: VehicleClass,
        raw_distance: float,
        billable_distance: float
    ) -> float:
        """Driver batta for outstation trips and outstation drops."""
        is_outstation_drop = (
            mode == FareMode.DROP and raw_distance > self.settings.local_drop_threshold_km
        )
        if mode != FareMode.OUTSTATION and not is_outstation_drop:
            return 0.0

        days = trip.days
        if trip.manual_bata_mode == AllowanceMode.SINGLE:
            count = days
        elif trip.manual_bata_mode == AllowanceMode.DOUBLE:
            count = 2 * days
        else:
            count = days
            # Double shift driving on long round trips
            if (
                mode == FareMode.OUTSTATION
                and days > 0
                and billable_distance / days > self.settings.high_mileage_km_per_day
            ):
                count = 2 * days

        return vehicle.batta * count

    def _interstate_permit(self, trip: TripParameters, vehicle: VehicleClass) -> float:
        if not trip.interstate_state:
            return 0.0
        fee = self.catalog.get_permit_fee(
            trip.interstate_state, vehicle.body_type, self.settings.default_permit_fee
        )
        return fee or 0.0


def calculate_fare(
    trip: Union[TripParameters, Mapping[str, Any]],
    catalog: Optional[RateCatalog] = None,
    settings: Optional[Settings] = None
) -> FareBreakdown:
    """Calculate a fare breakdown with the default (or given) catalog.

    Example:
        >>> breakdown = calculate_fare({"mode": "drop", "vehicle_id": "sedan",
        ...                             "start_km": 0, "end_km": 150})
        >>> breakdown.distance_charge == 2400
        True
    """
    return FareCalculator(catalog, settings).calculate(trip)
