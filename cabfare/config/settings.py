"""Centralized configuration management using Pydantic Settings.

This module provides a single source of truth for all configuration values.
All settings can be overridden via environment variables.
"""

from pathlib import Path
from typing import List, Optional, Tuple
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables.
    For example, GST_RATE=0.12 will override the default 5% GST.
    Settings are frozen once constructed so tariffs cannot be patched
    at runtime.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True
    )

    # ========== File Paths Configuration ==========
    rate_catalog_json: Optional[Path] = Field(
        default=None,
        description="Path to the rate catalog JSON file (None uses the packaged catalog)"
    )

    # ========== Tax Configuration ==========
    gst_rate: float = Field(
        default=0.05,
        description="GST rate applied to the taxable subtotal (0.05 = 5%)"
    )

    # ========== Distance Rules ==========
    garage_buffer_km: float = Field(
        default=20.0,
        description="Dead mileage added to outstation trips when the garage buffer is on"
    )
    local_drop_threshold_km: float = Field(
        default=30.0,
        description="Drops up to this distance are billed as local drops"
    )
    local_drop_included_km: float = Field(
        default=10.0,
        description="Kilometres covered by the local drop base fee"
    )
    local_drop_base_fee: float = Field(
        default=250.0,
        description="Local drop base fee for hatchbacks and sedans"
    )
    local_drop_base_fee_large: float = Field(
        default=350.0,
        description="Local drop base fee for SUV and Van body types"
    )
    outstation_drop_min_km: float = Field(
        default=130.0,
        description="Minimum billable distance for an outstation drop"
    )
    heavy_local_threshold_km: float = Field(
        default=50.0,
        description="Heavy vehicle drops up to this distance pay the local package"
    )

    # ========== Driver Allowance ==========
    high_mileage_km_per_day: float = Field(
        default=400.0,
        description="Average daily distance above which round trips get a double allowance"
    )

    # ========== Surcharges ==========
    large_vehicle_seats: int = Field(
        default=7,
        description="Vehicles with more seats than this use the large-vehicle surcharges"
    )
    waiting_rate: float = Field(default=100.0, description="Waiting charge per hour")
    waiting_rate_large: float = Field(default=300.0, description="Waiting charge per hour for large vehicles")
    hill_station_charge: float = Field(default=300.0, description="Hill station charge for cars")
    hill_station_charge_suv: float = Field(default=500.0, description="Hill station charge for SUVs")
    hill_station_charge_large: float = Field(default=1500.0, description="Hill station charge for large vehicles")
    pet_charge: float = Field(default=500.0, description="Flat pet transport charge")

    # ========== Interstate Permits ==========
    default_permit_fee: float = Field(
        default=2000.0,
        description="Permit fee when neither the body type nor Van is tabulated for a state"
    )

    # ========== Hourly / Local Packages ==========
    package_included_hours: float = Field(default=8.0, description="Hours included in a local package")
    package_included_km: float = Field(default=80.0, description="Kilometres included in a local package")
    package_extra_hour_rate: float = Field(default=250.0, description="Fallback rate per extra package hour")
    hourly_rate: float = Field(default=350.0, description="Fallback hourly rate for cars")
    hourly_rate_suv: float = Field(default=450.0, description="Fallback hourly rate for SUVs")
    hourly_minimum_tiers: List[Tuple[float, float, float]] = Field(
        default=[(5.0, 2200.0, 1800.0), (10.0, 4000.0, 3200.0)],
        description="(max hours, SUV minimum, other minimum) tiers for hourly hire"
    )

    # ========== Server Configuration ==========
    server_host: str = Field(
        default="0.0.0.0",
        description="Estimator UI host address"
    )
    server_port: int = Field(
        default=7860,
        description="Estimator UI port number"
    )

    # ========== Logging Configuration ==========
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file; console only when unset"
    )

    def get_rate_catalog_path(self, package_dir: Path) -> Path:
        """Get absolute path to the rate catalog JSON file.

        Args:
            package_dir: Directory of the cabfare package

        Returns:
            Absolute path to the rate catalog JSON file
        """
        if self.rate_catalog_json is None:
            return package_dir / "data" / "rate_catalog.json"
        if self.rate_catalog_json.is_absolute():
            return self.rate_catalog_json
        return Path.cwd() / self.rate_catalog_json


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Creates and caches a Settings instance on first call.
    Subsequent calls return the cached instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
