# src/pointgrid/io/config.py
import json
from collections.abc import Mapping
from pathlib import Path

from pointgrid.config.models import PointGridConfig


def load_config(source: PointGridConfig | Mapping | str | Path | None = None) -> PointGridConfig:
    """Validate library options from a model, a mapping or a JSON file path."""
    if source is None:
        return PointGridConfig()
    if isinstance(source, PointGridConfig):
        return source
    if isinstance(source, Mapping):
        return PointGridConfig.model_validate(source)
    raw = Path(source).expanduser().read_text(encoding="utf-8")
    return PointGridConfig.model_validate(json.loads(raw))
