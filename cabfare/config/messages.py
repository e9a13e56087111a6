"""User-facing messages and display strings.

The pricing core only emits Advisory reason codes; their prose lives here
so callers can render (and later translate) it at the UI boundary.
"""

from cabfare.models.schema import Advisory

# Advisory display text
ADVISORY_MESSAGES = {
    Advisory.NONE: "",
    Advisory.MINIMUM_PACKAGE_APPLIED: (
        "Standard Minimum Charge (5 Hrs / 50 KM) applied for Heavy Vehicles."
    ),
    Advisory.DROP_BILLED_AS_ROUND_TRIP: (
        "Heavy Vehicle Drop calculated as Round Trip (Distance x 2)"
    ),
    Advisory.HILL_STATION_ROUND_TRIP: (
        "Hill station drop billed as Outstation Round Trip (Distance x 2)"
    ),
}

# Error Messages
ERROR_UNKNOWN_VEHICLE = "Select a vehicle to calculate the fare."
ERROR_INVALID_TRIP = "Trip details are incomplete or invalid: {details}"

# Format Strings
FORMAT_CURRENCY_SYMBOL = "₹"
FORMAT_TOTAL_LABEL = "Total:"
FORMAT_BREAKDOWN_LABEL = "Breakdown:"


def advisory_text(advisory: Advisory) -> str:
    """Return the display text for an advisory reason code."""
    return ADVISORY_MESSAGES.get(advisory, "")
