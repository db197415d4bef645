"""Load and validate the reference tables from JSON files."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from sustain_roi.config.settings import get_settings
from sustain_roi.reference.schema import ReferenceData

logger = logging.getLogger(__name__)

# Bundled reference tables
_DATA_DIR = Path(__file__).parent / "data"
DEFAULT_REFERENCE_FILE = _DATA_DIR / "reference_v1.json"


def load_reference_data(file_path: Path | None = None) -> ReferenceData:
    """Load and validate reference data from a JSON file.

    If no path is provided, loads the bundled V1 tables.
    """
    if file_path is None:
        file_path = DEFAULT_REFERENCE_FILE

    if not file_path.exists():
        raise FileNotFoundError(f"Reference data not found: {file_path}")

    with open(file_path, "r") as f:
        raw = json.load(f)

    data = ReferenceData.model_validate(raw)
    logger.debug(
        "Loaded reference data %s: %d industries, %d maturity levels",
        data.version,
        len(data.industries),
        len(data.maturity_levels),
    )
    return data


@lru_cache(maxsize=1)
def get_reference_data() -> ReferenceData:
    """Return the process-wide reference tables, loading them on first use."""
    configured = get_settings().reference_data_path
    return load_reference_data(Path(configured) if configured else None)
