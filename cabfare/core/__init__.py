"""Core business logic modules."""

from cabfare.core.catalog_loader import CatalogLoader
from cabfare.core.calculator import FareCalculator, DistanceQuote, calculate_fare
from cabfare.core.gst import calculate_gst, determine_gst_type, is_valid_gstin
from cabfare.core.permits import estimate_permit_charge
from cabfare.core.worker import FareWorker, FareWorkerError, calculate_fare_async

__all__ = [
    "CatalogLoader",
    "FareCalculator",
    "DistanceQuote",
    "calculate_fare",
    "calculate_gst",
    "determine_gst_type",
    "is_valid_gstin",
    "estimate_permit_charge",
    "FareWorker",
    "FareWorkerError",
    "calculate_fare_async",
]
