from __future__ import annotations
from typing import Iterable, List, Optional
import logging
import math
from .datatypes import Document, Sentence
from .config import SummarizerConfig
from .preprocessing import preprocess_text
from .scoring import INITIAL_SCORES, METHODS, METHOD_TEXTRANK, METHOD_TFISF, score_sentences

logger = logging.getLogger(__name__)

SUMMARY_HEADER = "Summary:"
DEFAULT_PERCENTAGE = 20.0
DEFAULT_COUNT = 3

def summary_size(n: int, percentage: float) -> int:
    """Number of sentences kept when summarizing ``percentage`` percent of ``n``."""
    if not math.isfinite(percentage):
        raise ValueError(f"percentage must be a finite number, got {percentage}")
    percentage = min(max(percentage, 0.0), 100.0)
    k = math.ceil(n * percentage / 100.0)
    return min(max(k, 0), n)

def rank_sentences(doc: Document) -> List[Sentence]:
    # highest score first; equal scores keep document order
    return sorted(doc.sentences, key=lambda s: (-s.score, s.idx))

def select_sentences(doc: Document, k: int) -> List[Sentence]:
    k = min(max(k, 0), len(doc.sentences))
    selected = rank_sentences(doc)[:k]
    selected.sort(key=lambda s: s.idx)  # restore original order
    return selected

def generate_summary(doc: Document, k: int) -> str:
    return "\n".join(s.text for s in select_sentences(doc, k))

def format_summary(sentences: Iterable[Sentence]) -> str:
    lines = [SUMMARY_HEADER, ""]
    lines.extend(" ".join(s.text.split()) for s in sentences)
    return "\n".join(lines) + "\n"

def _target_size(method: str, n: int, length: Optional[float]) -> int:
    if method == METHOD_TEXTRANK:
        return summary_size(n, DEFAULT_PERCENTAGE if length is None else float(length))
    if method == METHOD_TFISF:
        return int(DEFAULT_COUNT if length is None else length)
    raise ValueError(f"Unknown method: {method}")

def summarize(text: str, method: str = METHOD_TEXTRANK, length: Optional[float] = None,
              config: Optional[SummarizerConfig] = None) -> List[Sentence]:
    """
    Run the whole pipeline and return the selected sentences in document order.

    ``length`` is a percentage of the sentence count for ``textrank`` and an
    absolute sentence count for ``tfisf``.
    """
    config = config or SummarizerConfig()
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method}")
    # Pipeline glue
    doc = preprocess_text(text, cfg=config.preprocess, initial_score=INITIAL_SCORES[method])
    score_sentences(doc, method, cfg=config.rank)
    k = _target_size(method, len(doc.sentences), length)
    selected = select_sentences(doc, k)
    logger.debug("selected %d of %d sentences with %s", len(selected), len(doc.sentences), method)
    return selected

def summarize_text(text: str, method: str = METHOD_TEXTRANK, length: Optional[float] = None,
                   config: Optional[SummarizerConfig] = None) -> str:
    return "\n".join(s.text for s in summarize(text, method=method, length=length, config=config))
