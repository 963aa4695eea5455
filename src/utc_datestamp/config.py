"""Configuration helpers for utc-datestamp."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import yaml

LOGGER = logging.getLogger(__name__)

EpochUnit = Literal["ms", "s"]

_EPOCH_UNIT_FACTORS: dict[str, int] = {"ms": 1, "s": 1000}


@dataclass(slots=True)
class FormattingConfig:
    assume_utc: bool = True
    epoch_unit: EpochUnit = "ms"

    def to_milliseconds(self, value: float) -> float:
        """Scale an epoch value in ``epoch_unit`` to milliseconds."""
        factor = _EPOCH_UNIT_FACTORS[self.epoch_unit]
        return value * factor


@dataclass(slots=True)
class DatestampConfig:
    source: Path | None = None
    formatting: FormattingConfig = field(default_factory=FormattingConfig)

    @classmethod
    def from_file(cls, path: Path) -> DatestampConfig:
        if not path.exists():
            LOGGER.debug("Config file %s not found; using defaults.", path)
            return cls(source=None)
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(raw, dict):
            message = f"Config file {path} must contain a mapping at the top level."
            raise ValueError(message)
        formatting = raw.get("formatting", {}) or {}
        instance = cls(
            source=path,
            formatting=FormattingConfig(
                assume_utc=formatting.get("assume_utc", True),
                epoch_unit=formatting.get("epoch_unit", "ms"),
            ),
        )
        instance.validate()
        LOGGER.debug("Loaded config from %s", path)
        return instance

    def validate(self) -> None:
        """Reject settings the formatters cannot honour."""
        if not isinstance(self.formatting.assume_utc, bool):
            message = f"formatting.assume_utc must be a boolean, got {self.formatting.assume_utc!r}."
            raise ValueError(message)
        if self.formatting.epoch_unit not in _EPOCH_UNIT_FACTORS:
            available = ", ".join(sorted(_EPOCH_UNIT_FACTORS))
            message = f"Unsupported epoch unit '{self.formatting.epoch_unit}'. Available: {available}."
            raise ValueError(message)
