"""Unit tests for GST helpers."""

from datetime import date

import pytest

from cabfare.core.gst import (
    calculate_gst,
    determine_gst_type,
    get_financial_year,
    get_gst_state_code,
    get_state_name,
    is_valid_gstin,
)
from cabfare.models.schema import GstType

TAMIL_NADU_GSTIN = "33AAAAA0000A1Z5"
KARNATAKA_GSTIN = "29BBBBB1111B1Z3"


class TestGstin:
    """Test GSTIN parsing and validation."""

    def test_valid_gstin(self):
        assert is_valid_gstin(TAMIL_NADU_GSTIN)
        assert is_valid_gstin(TAMIL_NADU_GSTIN.lower())

    def test_empty_gstin_is_valid(self):
        assert is_valid_gstin("")
        assert is_valid_gstin(None)

    @pytest.mark.parametrize("gstin", [
        "33AAAAA0000A1X5",
        "3AAAAA0000A1Z5",
        "33AAAAA0000A0Z5",
        "not-a-gstin",
    ])
    def test_invalid_gstin(self, gstin):
        assert not is_valid_gstin(gstin)

    def test_state_code_and_name(self):
        assert get_gst_state_code(TAMIL_NADU_GSTIN) == "33"
        assert get_state_name("33") == "Tamil Nadu"
        assert get_state_name("99") == "Unknown State"
        assert get_gst_state_code("3") is None


class TestGstType:
    """Test place-of-supply decision."""

    def test_inter_state_b2b(self):
        assert determine_gst_type(TAMIL_NADU_GSTIN, KARNATAKA_GSTIN) == GstType.IGST

    def test_intra_state_b2b(self):
        assert determine_gst_type(TAMIL_NADU_GSTIN, "33CCCCC2222C1Z1") == GstType.CGST_SGST

    def test_b2c_is_intra_state(self):
        assert determine_gst_type(TAMIL_NADU_GSTIN) == GstType.CGST_SGST

    def test_unknown_supplier_is_intra_state(self):
        assert determine_gst_type("", KARNATAKA_GSTIN) == GstType.CGST_SGST


class TestCalculateGst:
    """Test GST split."""

    def test_intra_state_split(self):
        breakdown = calculate_gst(1000, 5, TAMIL_NADU_GSTIN)
        assert breakdown.cgst == 25
        assert breakdown.sgst == 25
        assert breakdown.igst == 0
        assert breakdown.total_tax == 50
        assert breakdown.total_amount == 1050
        assert not breakdown.is_inter_state

    def test_inter_state_igst(self):
        breakdown = calculate_gst(1000, 5, TAMIL_NADU_GSTIN, KARNATAKA_GSTIN)
        assert breakdown.igst == 50
        assert breakdown.cgst == 0
        assert breakdown.type == GstType.IGST
        assert breakdown.is_inter_state

    def test_twelve_percent(self):
        breakdown = calculate_gst(1000, 12)
        assert breakdown.cgst == 60
        assert breakdown.total_tax == 120

    def test_small_amount_rounds_components(self):
        breakdown = calculate_gst(10)
        assert breakdown.total_tax == 0

    def test_unsupported_rate(self):
        with pytest.raises(ValueError):
            calculate_gst(1000, 18)


class TestFinancialYear:
    """Test Indian financial year labels."""

    @pytest.mark.parametrize("day, expected", [
        (date(2026, 2, 1), "25-26"),
        (date(2026, 4, 1), "26-27"),
        (date(2026, 3, 31), "25-26"),
        (date(2000, 4, 1), "00-01"),
    ])
    def test_financial_year(self, day, expected):
        assert get_financial_year(day) == expected
