from __future__ import annotations
from typing import Dict, List, Optional
from collections import Counter
import logging
import math
import numpy as np
from .datatypes import Document, TermStat
from .preprocessing import PreprocessConfig, tokenize

logger = logging.getLogger(__name__)

def token_similarity(tokens_a: List[str], tokens_b: List[str]) -> float:
    """
    Overlap similarity between two token lists:

        |vocab(a) & vocab(b)| / (ln(|a| + 1) + ln(|b| + 1))

    |a| and |b| count every token, repeats included; the overlap counts each
    shared word once. Two empty lists give a zero denominator, scored as 0.0.
    """
    denom = math.log(len(tokens_a) + 1) + math.log(len(tokens_b) + 1)
    if denom == 0.0:
        return 0.0
    common = len(set(tokens_a) & set(tokens_b))
    return common / denom

def similarity(a: str, b: str, cfg: Optional[PreprocessConfig] = None) -> float:
    cfg = cfg or PreprocessConfig()
    return token_similarity(tokenize(a, cfg), tokenize(b, cfg))

def compute_similarity_matrix(doc: Document) -> np.ndarray:
    """N x N sentence similarities with a zero diagonal, computed once per document."""
    n = len(doc.sentences)
    M = np.zeros((n, n), dtype=float)
    for i in range(n):
        for j in range(i+1, n):
            sim = token_similarity(doc.sentences[i].tokens, doc.sentences[j].tokens)
            M[i, j] = M[j, i] = sim
    return M

def document_frequencies(doc: Document) -> Counter:
    # occurrences over the whole token stream, not per-sentence presence
    counts: Counter = Counter()
    for s in doc.sentences:
        counts.update(s.tokens)
    return counts

def _safe_log(numer: int, denom: int) -> float:
    # both operands clamped to >= 1 so the result is always finite
    return math.log(max(1, numer) / max(1, denom))

def compute_term_stats(doc: Document) -> Dict[str, TermStat]:
    """
    TF-ISF weight of every unique term:

      - tf  = count / sentence_count
      - idf = ln(sentence_count / count)
      - weight = tf * idf

    ``count`` is the document-wide occurrence count, so a term seen exactly
    once per sentence on average weighs 0.
    """
    n = len(doc.sentences)
    counts = document_frequencies(doc)
    stats: Dict[str, TermStat] = {}
    for term, count in counts.items():
        tf = count / max(1, n)
        idf = _safe_log(n, count)
        stats[term] = TermStat(term=term, document_frequency=count, weight=tf * idf)
    logger.debug("computed weights for %d unique terms over %d sentences", len(stats), n)
    return stats
