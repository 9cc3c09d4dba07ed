from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Optional
from .preprocessing import STOPWORDS, PreprocessConfig
from .scoring import RankConfig

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

def _split_csv(value: Optional[str]) -> FrozenSet[str]:
    if not value:
        return frozenset()
    return frozenset(item.strip().lower() for item in value.split(",") if item.strip())

@dataclass
class SummarizerConfig:
    """Tuning knobs shared by the CLI, the app and ``summarize``."""

    preprocess: PreprocessConfig = field(default_factory=PreprocessConfig)
    rank: RankConfig = field(default_factory=RankConfig)

    @classmethod
    def from_env(cls) -> "SummarizerConfig":
        import os

        stop_words = os.getenv("TEXTSUM_STOPWORDS")
        preprocess = PreprocessConfig(
            stop_words=_split_csv(stop_words) if stop_words is not None else STOPWORDS,
            max_sentences=_parse_int("TEXTSUM_MAX_SENTENCES", os.getenv("TEXTSUM_MAX_SENTENCES")),
        )
        rank = RankConfig(
            damping=_parse_float("TEXTSUM_DAMPING", os.getenv("TEXTSUM_DAMPING"), default=0.85),
            iterations=_parse_int("TEXTSUM_ITERATIONS", os.getenv("TEXTSUM_ITERATIONS"), default=20),
            synchronous=_parse_bool("TEXTSUM_SYNCHRONOUS", os.getenv("TEXTSUM_SYNCHRONOUS"), default=True),
        )
        return cls(preprocess=preprocess, rank=rank)

def _parse_int(name: str, value: Optional[str], default: Optional[int] = None) -> Optional[int]:
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer if set") from None

def _parse_float(name: str, value: Optional[str], default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number if set") from None

def _parse_bool(name: str, value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUE | _FALSE)}")
