"""JSON save/load/list for wind impact analyses."""

from __future__ import annotations

import json
import re
from pathlib import Path

from windimpact.models import WindImpactAnalysis

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent.parent.parent / "data"


def _slug(path_name: str) -> str:
    """Filesystem-safe directory name for a path."""
    slug = re.sub(r"[^a-z0-9]+", "-", path_name.lower()).strip("-")
    return slug or "path"


def save_analysis(analysis: WindImpactAnalysis, data_dir: Path | None = None) -> Path:
    """Save an analysis to data/analyses/{slug}/{timestamp}.json. Returns the path written."""
    data_dir = data_dir or DEFAULT_DATA_DIR
    out_dir = data_dir / "analyses" / _slug(analysis.path_name)
    out_dir.mkdir(parents=True, exist_ok=True)

    stamp = analysis.computed_at.strftime("%Y%m%dT%H%M%S%fZ")
    out_path = out_dir / f"{stamp}.json"
    out_path.write_text(analysis.model_dump_json(indent=2))
    return out_path


def load_analysis(path: Path) -> WindImpactAnalysis:
    """Load an analysis from JSON."""
    raw = json.loads(Path(path).read_text())
    return WindImpactAnalysis.model_validate(raw)


def list_analyses(path_name: str, data_dir: Path | None = None) -> list[Path]:
    """Saved analyses for a path, oldest first."""
    data_dir = data_dir or DEFAULT_DATA_DIR
    target_dir = data_dir / "analyses" / _slug(path_name)

    if not target_dir.exists():
        return []
    return sorted(target_dir.glob("*.json"))
