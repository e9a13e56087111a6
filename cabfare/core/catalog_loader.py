"""Load the rate catalog from disk."""

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from cabfare.models.schema import RateCatalog, VehicleClass
from cabfare.config.settings import get_settings
from cabfare.config.logging_config import get_logger

logger = get_logger(__name__)

_default_catalog: Optional[RateCatalog] = None


class CatalogLoader:
    """Load rate catalogs from JSON files.

    The catalog is read once at process start and shared read-only by
    every calculation. All methods are static for convenience.
    """

    @staticmethod
    def load_from_json(json_path: Path) -> RateCatalog:
        """
        Load a rate catalog from a JSON file.

        Vehicle entries that fail validation are skipped with a warning so a
        single bad row does not take the whole tariff down.

        Args:
            json_path: Path to JSON file containing vehicles and permits

        Returns:
            RateCatalog with loaded vehicles and permit table

        Raises:
            FileNotFoundError: If the file does not exist
        """
        json_path = Path(json_path) if isinstance(json_path, str) else json_path
        if not json_path.exists():
            raise FileNotFoundError(f"Rate catalog file not found: {json_path}")

        logger.info(f"Loading rate catalog from: {json_path}")

        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        vehicles = []
        for vehicle_dict in data.get("vehicles", []):
            try:
                vehicles.append(VehicleClass(**vehicle_dict))
            except ValidationError as e:
                logger.warning(f"Failed to load vehicle: {e}")
                logger.debug(f"Vehicle data: {vehicle_dict}")

        permits = {
            state.strip().lower(): fees
            for state, fees in data.get("permits", {}).items()
        }

        catalog = RateCatalog(
            vehicles=vehicles,
            permits=permits,
            region=data.get("region", "Chennai"),
            version=data.get("version", "2025")
        )

        logger.info(f"Loaded {len(vehicles)} vehicle classes and {len(permits)} permit states")
        return catalog

    @staticmethod
    def get_default_path() -> Path:
        """Get default path to the rate catalog.

        Returns:
            Path from settings, or the catalog shipped with the package.
        """
        package_dir = Path(__file__).parent.parent
        return get_settings().get_rate_catalog_path(package_dir)

    @staticmethod
    def load_default() -> RateCatalog:
        """
        Load the rate catalog from the default location.

        The catalog is cached after the first load.

        Returns:
            RateCatalog
        """
        global _default_catalog
        if _default_catalog is None:
            _default_catalog = CatalogLoader.load_from_json(CatalogLoader.get_default_path())
        return _default_catalog
