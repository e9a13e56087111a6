"""Estimate state entry permits from pickup and drop addresses.

Operators are based in Tamil Nadu, so only trips picked up there are
estimated. Amounts vary by vehicle category.
"""

from typing import Iterable, Optional

from cabfare.models.schema import PermitEstimate

TAMIL_NADU_KEYWORDS = ("tamil nadu", "chennai", "coimbatore", "madurai", "trichy", "salem")

SUV_IDS = ("suv", "premium_suv")
HEAVY_IDS = ("tempo", "minibus", "bus")

# state name, invoice prefix, drop keywords, (small, suv, heavy) amounts, per-vehicle overrides
PERMIT_ESTIMATES = (
    (
        "Karnataka", "KA",
        ("karnataka", "bangalore", "bengaluru", "mysore", "mangalore", "hosur"),
        (850, 1250, 1850),
        {"minibus": 2500, "bus": 3500},
    ),
    (
        "Kerala", "KL",
        ("kerala", "kochi", "trivandrum", "palakkad", "kozhikode"),
        (750, 1100, 1600),
        {"minibus": 2800, "bus": 2800},
    ),
    (
        "Andhra Pradesh", "AP",
        ("andhra", "vijayawada", "visakhapatnam", "tirupati", "chittoor"),
        (900, 1350, 1950),
        {"minibus": 3200, "bus": 3200},
    ),
    (
        "Puducherry", "PY",
        ("puducherry", "pondicherry", "pondicherri"),
        (100, 150, 250),
        {"bus": 500},
    ),
)


def _mentions(address: str, keywords: Iterable[str]) -> bool:
    return any(keyword in address for keyword in keywords)


def estimate_permit_charge(
    pickup: Optional[str],
    drop: Optional[str],
    vehicle_id: Optional[str] = None
) -> Optional[PermitEstimate]:
    """Estimate the entry permit for a trip leaving Tamil Nadu.

    Args:
        pickup: Pickup address
        drop: Drop address
        vehicle_id: Catalog vehicle id (hatchback/sedan are the small category)

    Returns:
        PermitEstimate, or None if the pickup is outside Tamil Nadu or the
        drop is not in a neighbouring permit state
    """
    pickup = (pickup or "").lower()
    drop = (drop or "").lower()

    if not _mentions(pickup, TAMIL_NADU_KEYWORDS):
        return None

    for state, prefix, keywords, (small, suv, heavy), overrides in PERMIT_ESTIMATES:
        if not _mentions(drop, keywords):
            continue

        amount = small
        if vehicle_id in SUV_IDS:
            amount = suv
        elif vehicle_id in HEAVY_IDS:
            amount = overrides.get(vehicle_id, heavy)

        if prefix == "PY":
            description = "PY Permit"
        else:
            description = f"{prefix} Permit ({vehicle_id or 'Commercial'})"
        return PermitEstimate(amount=amount, state=state, description=description)

    return None
