# cayenne/app/config.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DecoderConfig:
    types_path: Optional[str | Path] = None  # None = bundled standard_types.yml
