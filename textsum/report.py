"""Tabular views of the pipeline state, used by the inspection app."""
from __future__ import annotations
from typing import Dict, Iterable, Optional
import numpy as np
import pandas as pd
from .datatypes import Document, TermStat

def _preview(text: str, width: int = 80) -> str:
    return text[:width] + "..." if len(text) > width else text

def sentence_table(doc: Document, selected: Optional[Iterable[int]] = None) -> pd.DataFrame:
    chosen = set(selected or [])
    rows = []
    for s in doc.sentences:
        rows.append({
            "Sentence #": s.idx + 1,
            "Score": s.score,
            "Tokens": len(s.tokens),
            "Selected": s.idx in chosen,
            "Text": _preview(s.text),
        })
    return pd.DataFrame(rows, columns=["Sentence #", "Score", "Tokens", "Selected", "Text"])

def term_table(stats: Dict[str, TermStat]) -> pd.DataFrame:
    """Terms ordered by descending weight, ties alphabetical."""
    rows = [
        {"Term": t.term, "Frequency": t.document_frequency, "Weight": t.weight}
        for t in sorted(stats.values(), key=lambda t: (-t.weight, t.term))
    ]
    return pd.DataFrame(rows, columns=["Term", "Frequency", "Weight"])

def similarity_frame(matrix: np.ndarray) -> pd.DataFrame:
    labels = [f"S{i+1}" for i in range(len(matrix))]
    return pd.DataFrame(matrix, columns=labels, index=labels)
