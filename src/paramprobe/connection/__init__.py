"""Connection adapters that supply a ParameterSource."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from ..config import Config
from ..parameters.model import ParameterSource
from .http import HttpParameter, HttpParameterSource
from .memory import MemoryParameterSource, StaticParameter
from .snapshot import SnapshotParameterSource, load_snapshot

logger = logging.getLogger(__name__)


@contextmanager
def open_source(config: Config) -> Iterator[ParameterSource]:
    """Open the parameter source described by ``config`` for one command."""
    if config.snapshot:
        logger.debug("Reading parameters from snapshot %s", config.snapshot)
        yield SnapshotParameterSource(config.snapshot)
        return

    logger.debug("Connecting to %s", config.connection.base_url)
    with HttpParameterSource(config.connection) as source:
        yield source


__all__ = [
    "HttpParameter",
    "HttpParameterSource",
    "MemoryParameterSource",
    "SnapshotParameterSource",
    "StaticParameter",
    "load_snapshot",
    "open_source",
]
