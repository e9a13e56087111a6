"""GST helpers for cab invoices (GSTIN checks and CGST/SGST/IGST split)."""

import re
from datetime import date
from typing import Optional

from cabfare.models.schema import GSTBreakdown, GstType
from cabfare.models.utils import round_half_up

GST_STATE_CODES = {
    "01": "Jammu and Kashmir",
    "02": "Himachal Pradesh",
    "03": "Punjab",
    "04": "Chandigarh",
    "05": "Uttarakhand",
    "06": "Haryana",
    "07": "Delhi",
    "08": "Rajasthan",
    "09": "Uttar Pradesh",
    "10": "Bihar",
    "11": "Sikkim",
    "12": "Arunachal Pradesh",
    "13": "Nagaland",
    "14": "Manipur",
    "15": "Mizoram",
    "16": "Tripura",
    "17": "Meghalaya",
    "18": "Assam",
    "19": "West Bengal",
    "20": "Jharkhand",
    "21": "Odisha",
    "22": "Chhattisgarh",
    "23": "Madhya Pradesh",
    "24": "Gujarat",
    "25": "Daman and Diu",
    "26": "Dadra and Nagar Haveli",
    "27": "Maharashtra",
    "28": "Andhra Pradesh (Old)",
    "29": "Karnataka",
    "30": "Goa",
    "31": "Lakshadweep",
    "32": "Kerala",
    "33": "Tamil Nadu",
    "34": "Puducherry",
    "35": "Andaman and Nicobar Islands",
    "36": "Telangana",
    "37": "Andhra Pradesh",
    "38": "Ladakh",
    "97": "Other Territory",
}

# 2 digits (state) + PAN (5 letters, 4 digits, 1 letter) + entity + 'Z' + check
GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}$")

GST_RATES = (5, 12)


def is_valid_gstin(gstin: Optional[str]) -> bool:
    """Check the format of a GSTIN.

    The GSTIN is optional on an invoice, so an empty value is valid.
    """
    if not gstin:
        return True
    return GSTIN_PATTERN.match(gstin.upper()) is not None


def get_gst_state_code(gstin: Optional[str]) -> Optional[str]:
    if not gstin or len(gstin) < 2:
        return None
    return gstin[:2]


def get_state_name(code: str) -> str:
    return GST_STATE_CODES.get(code, "Unknown State")


def determine_gst_type(supplier_gstin: Optional[str], customer_gstin: Optional[str] = None) -> GstType:
    """Decide between IGST and CGST + SGST for passenger transport.

    B2B supplies (customer GSTIN given) compare the supplier and customer
    state codes. B2C supplies, or an unknown supplier, default to
    intra-state since operators run from their home state.

    Args:
        supplier_gstin: Operator's GSTIN
        customer_gstin: Customer's GSTIN, if registered

    Returns:
        GstType.IGST for inter-state supplies, GstType.CGST_SGST otherwise
    """
    supplier_code = get_gst_state_code(supplier_gstin)
    customer_code = get_gst_state_code(customer_gstin)
    if supplier_code is None or customer_code is None:
        return GstType.CGST_SGST
    return GstType.IGST if supplier_code != customer_code else GstType.CGST_SGST


def calculate_gst(
    amount: float,
    rate: int = 5,
    supplier_gstin: Optional[str] = None,
    customer_gstin: Optional[str] = None
) -> GSTBreakdown:
    """Split GST on an invoice amount into its components.

    Intra-state supplies round CGST and SGST separately (each half the
    rate); inter-state supplies carry the rounded tax as IGST.

    Args:
        amount: Taxable amount
        rate: GST rate in percent (5 or 12)
        supplier_gstin: Operator's GSTIN
        customer_gstin: Customer's GSTIN, if registered

    Returns:
        GSTBreakdown

    Raises:
        ValueError: If the rate is not a cab service GST rate
    """
    if rate not in GST_RATES:
        raise ValueError(f"Unsupported GST rate: {rate}. Expected one of {GST_RATES}")

    gst_type = determine_gst_type(supplier_gstin, customer_gstin)
    is_inter_state = gst_type == GstType.IGST

    cgst = sgst = igst = 0
    if is_inter_state:
        igst = round_half_up(amount * rate / 100)
    else:
        cgst = round_half_up(amount * rate / 200)
        sgst = round_half_up(amount * rate / 200)

    total_tax = igst if is_inter_state else cgst + sgst

    return GSTBreakdown(
        taxable_amount=amount,
        gst_rate=rate,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        total_tax=total_tax,
        total_amount=amount + total_tax,
        is_inter_state=is_inter_state,
        type=gst_type,
    )


def get_financial_year(day: date) -> str:
    """Indian financial year label (April to March) for a date.

    Example:
        >>> get_financial_year(date(2026, 2, 1))
        '25-26'
    """
    start_year = day.year if day.month >= 4 else day.year - 1
    return f"{str(start_year)[-2:]}-{str(start_year + 1)[-2:]}"
