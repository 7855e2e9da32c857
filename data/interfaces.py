"""
Abstract Data Provider interface for pluggable data sources.

Allows swapping the seed datasets for a real emissions inventory without
changing downstream code.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from models.conditions import SimulationConfig
from models.grid import LatticeBounds
from models.sources import CaptureIntervention, EmissionSource

logger = logging.getLogger(__name__)


class DataProvider(ABC):
    """Abstract base class for data sources.

    **Immutability contract:** sources, interventions, configs and bounds
    are frozen dataclasses, and every method returns a fresh list.  Callers
    build a new snapshot to change anything (see ``data.portfolio``) rather
    than mutating what a provider returned.  Catalog entries are plain dicts;
    copy before editing.
    """

    @abstractmethod
    def get_emission_sources(self) -> List[EmissionSource]:
        """Return the emission sources for the study area."""
        ...

    @abstractmethod
    def get_interventions(self) -> List[CaptureIntervention]:
        """Return the interventions deployed at the start of a session."""
        ...

    @abstractmethod
    def get_intervention_catalog(self) -> List[dict]:
        """Return deployable intervention templates.

        Each dict must have keys: 'category', 'name', 'capture_rate',
        'install_cost', 'annual_maintenance_cost', 'coverage_radius'.
        Optional key: 'description'.
        """
        ...

    def get_default_config(self) -> SimulationConfig:
        """Return the starting condition set."""
        from data.mock_data import get_default_config
        return get_default_config()

    def get_study_area(self) -> LatticeBounds:
        """Return the lattice over which the field is evaluated."""
        from data.mock_data import get_study_area
        return get_study_area()


class MockDataProvider(DataProvider):
    """Wraps existing mock_data.py functions."""

    def get_emission_sources(self) -> List[EmissionSource]:
        from data.mock_data import get_emission_sources
        return get_emission_sources()

    def get_interventions(self) -> List[CaptureIntervention]:
        from data.mock_data import get_interventions
        return get_interventions()

    def get_intervention_catalog(self) -> List[dict]:
        from data.mock_data import get_intervention_catalog
        return get_intervention_catalog()


class FileDataProvider(DataProvider):
    """Load site data from JSON files on disk.

    Args:
        sources_path: JSON array of source objects with keys 'id',
            'category', 'name', 'lat', 'lng', 'emission_rate' and
            optionally 'active'.  May be empty (a scenario with no sources).
        interventions_path: JSON array of intervention objects with keys
            'id', 'category', 'name', 'lat', 'lng', 'capture_rate',
            'install_cost', 'annual_maintenance_cost', 'coverage_radius'
            and optionally 'active'.  May be empty.
        catalog_path: Optional JSON array of catalog templates.  If not
            provided, ``get_intervention_catalog()`` returns the built-in
            catalog.

    Raises:
        ValueError: If required keys are missing or values are invalid
            (``models.errors.ValidationError`` for out-of-range values).
        FileNotFoundError: If any file does not exist.
    """

    _REQUIRED_SOURCE_KEYS = {"id", "category", "name", "lat", "lng", "emission_rate"}
    _REQUIRED_INTERVENTION_KEYS = {
        "id", "category", "name", "lat", "lng", "capture_rate",
        "install_cost", "annual_maintenance_cost", "coverage_radius",
    }
    _REQUIRED_CATALOG_KEYS = {
        "category", "name", "capture_rate", "install_cost",
        "annual_maintenance_cost", "coverage_radius",
    }

    def __init__(
        self,
        sources_path: str,
        interventions_path: str,
        catalog_path: Optional[str] = None,
    ):
        self._sources = self._load_sources(sources_path)
        self._interventions = self._load_interventions(interventions_path)
        if catalog_path:
            self._catalog = self._load_catalog(catalog_path)
        else:
            self._catalog = None
        logger.info(
            "loaded %d sources and %d interventions from disk",
            len(self._sources), len(self._interventions),
        )

    # -- loaders with validation ------------------------------------------

    @staticmethod
    def _load_array(path: str, label: str, allow_empty: bool = False) -> list:
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{label} file must contain a JSON array: {path}")
        if not data and not allow_empty:
            raise ValueError(f"{label} file must contain a non-empty JSON array: {path}")
        return data

    @staticmethod
    def _check_keys(entries: list, required: set, label: str, path: str) -> None:
        for i, entry in enumerate(entries):
            missing = required - set(entry.keys())
            if missing:
                raise ValueError(
                    f"{label} #{i} missing required keys {missing} in {path}"
                )

    @classmethod
    def _load_sources(cls, path: str) -> List[EmissionSource]:
        data = cls._load_array(path, "Sources", allow_empty=True)
        cls._check_keys(data, cls._REQUIRED_SOURCE_KEYS, "Source", path)
        keys = cls._REQUIRED_SOURCE_KEYS | {"active"}
        return [EmissionSource(**{k: v for k, v in d.items() if k in keys}) for d in data]

    @classmethod
    def _load_interventions(cls, path: str) -> List[CaptureIntervention]:
        data = cls._load_array(path, "Interventions", allow_empty=True)
        cls._check_keys(data, cls._REQUIRED_INTERVENTION_KEYS, "Intervention", path)
        keys = cls._REQUIRED_INTERVENTION_KEYS | {"active"}
        return [
            CaptureIntervention(**{k: v for k, v in d.items() if k in keys})
            for d in data
        ]

    @classmethod
    def _load_catalog(cls, path: str) -> List[dict]:
        data = cls._load_array(path, "Catalog")
        cls._check_keys(data, cls._REQUIRED_CATALOG_KEYS, "Catalog entry", path)
        return data

    # -- DataProvider interface -------------------------------------------

    def get_emission_sources(self) -> List[EmissionSource]:
        return list(self._sources)

    def get_interventions(self) -> List[CaptureIntervention]:
        return list(self._interventions)

    def get_intervention_catalog(self) -> List[dict]:
        if self._catalog is not None:
            return [c.copy() for c in self._catalog]
        from data.mock_data import get_intervention_catalog
        return get_intervention_catalog()
