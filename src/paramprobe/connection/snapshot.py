"""Parameters read from a snapshot file instead of a live device.

A snapshot is YAML (or JSON, by ``.json`` suffix) shaped like::

    parameters:
      - name: driverCode
        label: Driver Code
        value: ht
      - name: displaySize
        label: Display Size
        hidable: true
        value: [40, 1]
      - name: cellCount
        values: {0: 40, 1: 80}

Malformed entries are skipped with a warning so one bad entry does not hide
the rest of the device state.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..errors import ConfigError
from ..paths import snapshots_dir
from .memory import MemoryParameterSource, StaticParameter

logger = logging.getLogger(__name__)


def resolve_snapshot_path(path: str) -> Path:
    """Return ``path`` as given, or the same name under ~/.paramprobe/snapshots."""
    candidate = Path(path).expanduser()
    if candidate.exists() or candidate.is_absolute():
        return candidate
    saved = snapshots_dir() / candidate
    return saved if saved.exists() else candidate


def _read(path: Path) -> Any:
    try:
        text = path.read_text()
    except OSError as exc:
        raise ConfigError(f"cannot read snapshot {path}: {exc.strerror or exc}") from exc
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"snapshot {path} is not valid: {exc}") from exc


def _indexed_values(raw: Any) -> Optional[Any]:
    if raw is None or isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        return {int(key): item for key, item in raw.items()}
    raise ValueError(f"values must be a list or a mapping, not {type(raw).__name__}")


def validate_entry(raw: Any) -> Optional[StaticParameter]:
    """
    Convert one raw snapshot entry into a StaticParameter.
    Returns None if the entry has no usable name, a non-boolean hidable flag
    or bogus indexed values.
    """
    if not isinstance(raw, dict):
        logger.warning("Skipping snapshot entry that is not a mapping: %r", raw)
        return None

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        logger.warning("Skipping snapshot entry without a name: %r", raw)
        return None

    try:
        values = _indexed_values(raw.get("values"))
    except (TypeError, ValueError) as exc:
        logger.warning("Skipping snapshot entry %s: %s", name, exc)
        return None

    hidable = raw.get("hidable", False)
    if not isinstance(hidable, bool):
        logger.warning("Skipping snapshot entry %s: hidable must be true or false, not %r", name, hidable)
        return None

    label = raw.get("label")
    return StaticParameter(
        name,
        str(label) if label is not None else None,
        hidable=hidable,
        value=raw.get("value"),
        values=values,
    )


def load_snapshot(path: Path) -> MemoryParameterSource:
    data = _read(path)
    if not isinstance(data, dict) or not isinstance(data.get("parameters"), list):
        raise ConfigError(
            f"snapshot {path} must contain a 'parameters' list",
            hint="Expected a top-level 'parameters:' list of entries, each with a name.",
        )

    source = MemoryParameterSource()
    seen: Dict[str, int] = {}
    for position, raw in enumerate(data["parameters"]):
        parameter = validate_entry(raw)
        if parameter is None:
            continue
        if parameter.name in seen:
            logger.warning(
                "Skipping snapshot entry %d: %s already defined by entry %d",
                position, parameter.name, seen[parameter.name],
            )
            continue
        seen[parameter.name] = position
        source.add(parameter)

    logger.debug("Loaded %d parameters from %s", len(source), path)
    return source


class SnapshotParameterSource(MemoryParameterSource):
    """A MemoryParameterSource populated from a snapshot file."""

    def __init__(self, path: str) -> None:
        self.path = resolve_snapshot_path(path)
        super().__init__(load_snapshot(self.path).get_parameters())


__all__ = ["SnapshotParameterSource", "load_snapshot", "resolve_snapshot_path", "validate_entry"]
