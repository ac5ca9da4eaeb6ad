"""
Tuning resolution: built-in defaults, then an optional JSON file, then
command-line overrides. Every layer goes through the codec, so an override
is validated exactly like a value read from disk.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from minigames.domain.game_state import Tuning
from minigames.infra.exceptions import TuningDecodeError, TuningSaveError
from minigames.infra.tuning_codec import decode_tuning, encode_tuning

logger = logging.getLogger(__name__)


def load_tuning(path: Path | None = None, **overrides: Any) -> Tuning:
    doc = _read_document(path) if path is not None else encode_tuning(Tuning())

    if overrides:
        raw = doc.get("tuning", {}) if isinstance(doc, dict) else None
        if not isinstance(raw, dict):
            raise TuningDecodeError("tuning must be an object.")
        doc = {**doc, "tuning": {**raw, **overrides}}
        logger.debug("tuning overrides: %s", sorted(overrides))

    return decode_tuning(doc)


def save_tuning(tuning: Tuning, path: Path) -> None:
    text = json.dumps(encode_tuning(tuning), indent=2, sort_keys=True)
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=path.name, suffix=".tmp")
    except OSError as e:
        raise TuningSaveError(f"Failed to save tuning to {path}: {e}") from e

    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise TuningSaveError(f"Failed to save tuning to {path}: {e}") from e

    logger.info("Saved tuning to %s", path)


def _read_document(path: Path) -> Any:
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise TuningDecodeError(f"Failed to load tuning from {path}: {e}") from e
    logger.info("Read tuning from %s", path)
    return doc
