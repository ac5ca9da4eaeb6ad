from __future__ import annotations

import math
from dataclasses import asdict, fields
from typing import Any

from minigames.domain.game_state import Tuning
from minigames.infra.exceptions import TuningDecodeError, TuningEncodeError


_FORMAT = "minigames.tuning"
_VERSION_LATEST = 1

# Multiplicative factors; anything above 1 would accelerate forever.
_FRICTIONS = ("ground_friction", "air_friction")


def encode_tuning(tuning: Tuning) -> dict:
    try:
        return {
            "format": _FORMAT,
            "version": _VERSION_LATEST,
            "tuning": asdict(tuning),
        }
    except Exception as e:
        raise TuningEncodeError(f"Failed to encode tuning: {e}") from e


def decode_tuning(obj: Any) -> Tuning:
    try:
        if not isinstance(obj, dict):
            raise TuningDecodeError("Tuning document must be an object.")
        if obj.get("format") != _FORMAT:
            raise TuningDecodeError("Invalid tuning format marker.")

        ver = obj.get("version")
        if ver == 1:
            return _decode_v1(obj)

        raise TuningDecodeError("Unsupported tuning version.")
    except TuningDecodeError:
        raise
    except Exception as e:
        raise TuningDecodeError(f"Failed to decode tuning: {e}") from e


def _decode_v1(obj: dict) -> Tuning:
    raw = obj.get("tuning", {})
    if not isinstance(raw, dict):
        raise TuningDecodeError("tuning must be an object.")

    known = {f.name: f for f in fields(Tuning)}
    unknown = sorted(set(raw) - set(known))
    if unknown:
        raise TuningDecodeError(f"Unknown tuning keys: {', '.join(unknown)}.")

    values: dict[str, Any] = {}
    for name, value in raw.items():
        default = getattr(Tuning, name)

        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise TuningDecodeError(f"{name} must be a boolean.")
        elif isinstance(default, int):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TuningDecodeError(f"{name} must be an integer.")
            if value < 0:
                raise TuningDecodeError(f"{name} must be >= 0.")
        else:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TuningDecodeError(f"{name} must be a number.")
            value = float(value)
            if not math.isfinite(value):
                raise TuningDecodeError(f"{name} must be finite.")
            if value < 0:
                raise TuningDecodeError(f"{name} must be >= 0.")
            if name in _FRICTIONS and value > 1.0:
                raise TuningDecodeError(f"{name} must be <= 1.")

        values[name] = value

    return Tuning(**values)
