"""Coefficient registry — holds the active coefficient/WTP tables.

Starts from the built-in tables and optionally overlays a JSON file
(settings.COEFFICIENTS_FILE) of the form:

    {
      "version": "2025.1",
      "supporters": {
        "coefficients": {...},
        "wtp": {...},
        "provisional": false
      }
    }

Any preference model present in the file replaces the built-in tables for
that model; models absent from the file keep the built-ins.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fetp_aid.config import settings
from fetp_aid.coefficients.tables import default_tables
from fetp_aid.models.coefficients import PreferenceTables
from fetp_aid.models.configuration import PreferenceModel

logger = logging.getLogger(__name__)

BUILT_IN_VERSION = "0.1.0"


class CoefficientRegistry:
    """Singleton holding coefficient and WTP tables per preference model."""

    _instance: "CoefficientRegistry | None" = None

    def __init__(self) -> None:
        self.tables: dict[PreferenceModel, PreferenceTables] = default_tables()
        self.version = BUILT_IN_VERSION
        self.source: str = "built-in"
        self._loaded = False

    @classmethod
    def get(cls) -> "CoefficientRegistry":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton — mainly for testing."""
        cls._instance = None

    def load(self, path: str | Path | None = None) -> None:
        self.tables = default_tables()
        self.version = BUILT_IN_VERSION
        self.source = "built-in"

        raw_path = path if path is not None else settings.COEFFICIENTS_FILE
        if not raw_path:
            logger.info("Using built-in coefficient tables v%s", self.version)
            self._loaded = True
            return

        file_path = Path(raw_path).resolve()
        if not file_path.is_file():
            logger.warning("Coefficients file %s not found — using built-in tables", file_path)
            self._loaded = True
            return

        try:
            data = json.loads(file_path.read_text())
            overrides = {
                PreferenceModel(name): PreferenceTables(**{**data[name], "source": str(file_path)})
                for name in (m.value for m in PreferenceModel)
                if name in data
            }
            version = str(data.get("version", self.version))
        except (OSError, ValueError, TypeError, AttributeError, ValidationError) as e:
            logger.warning("Failed to load coefficients from %s, keeping built-ins: %s", file_path, e)
            self._loaded = True
            return

        self.tables.update(overrides)
        self.version = version
        self.source = str(file_path)
        self._loaded = True
        logger.info(
            "Loaded coefficient overrides v%s for %s from %s",
            self.version,
            [m.value for m in overrides],
            file_path,
        )

    def set_tables(self, model: PreferenceModel, tables: PreferenceTables) -> None:
        """Swap in tables for one preference model at runtime."""
        self.tables[model] = tables
        logger.info("Replaced %s tables (provisional=%s)", model.value, tables.provisional)

    def tables_for(self, model: PreferenceModel) -> PreferenceTables:
        return self.tables[model]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get_status(self) -> dict[str, Any]:
        if not self._loaded:
            return {"status": "not_loaded"}
        return {
            "status": "loaded",
            "version": self.version,
            "source": self.source,
            "tables": {
                model.value: {
                    "provisional": t.provisional,
                    "source": t.source,
                }
                for model, t in self.tables.items()
            },
        }
