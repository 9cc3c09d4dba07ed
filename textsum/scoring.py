from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional
import logging
import numpy as np
from .datatypes import Document, TermStat
from .features import compute_similarity_matrix, compute_term_stats

logger = logging.getLogger(__name__)

METHOD_TEXTRANK = "textrank"
METHOD_TFISF = "tfisf"
METHODS = (METHOD_TEXTRANK, METHOD_TFISF)

# starting score of every sentence, per method
INITIAL_SCORES = {METHOD_TEXTRANK: 1.0, METHOD_TFISF: 0.0}

@dataclass
class RankConfig:
    damping: float = 0.85
    iterations: int = 20
    synchronous: bool = True  # False = update scores in place while iterating

    def __post_init__(self):
        if not 0.0 <= self.damping <= 1.0:
            raise ValueError(f"damping must be within [0, 1], got {self.damping}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")

def textrank_scores(doc: Document, sim_matrix: Optional[np.ndarray] = None, cfg: Optional[RankConfig] = None) -> List[float]:
    """
    Propagate sentence scores over the similarity graph.

    Formula: S(i) = (1 - d) + d * sum_{j != i} sim(i, j) * S(j)

    Args:
        doc: Document whose sentences hold the starting scores
        sim_matrix: Precomputed similarity matrix (zero diagonal); built if omitted
        cfg: Damping factor, round count and update mode

    Returns:
        Final score of each sentence, also written back to ``doc.sentences``
    """
    cfg = cfg or RankConfig()
    n = len(doc.sentences)
    if n == 0:
        return []
    if sim_matrix is None:
        sim_matrix = compute_similarity_matrix(doc)
    d = cfg.damping
    scores = np.array([s.score for s in doc.sentences], dtype=float)

    # fixed number of rounds, no convergence check
    for _ in range(cfg.iterations):
        if cfg.synchronous:
            scores = (1.0 - d) + d * (sim_matrix @ scores)
        else:
            for i in range(n):
                scores[i] = (1.0 - d) + d * float(sim_matrix[i] @ scores)

    logger.debug("ran %d textrank rounds over %d sentences", cfg.iterations, n)
    result = scores.tolist()
    for s, score in zip(doc.sentences, result):
        s.score = score
    return result

def tfisf_scores(doc: Document, term_stats: Optional[Dict[str, TermStat]] = None) -> List[float]:
    if term_stats is None:
        term_stats = compute_term_stats(doc)
    result: List[float] = []
    for s in doc.sentences:
        # repeated words contribute once per occurrence
        score = 0.0
        for tok in s.tokens:
            stat = term_stats.get(tok)
            if stat is not None:
                score += stat.weight
        s.score = score
        result.append(score)
    return result

def score_sentences(doc: Document, method: str = METHOD_TEXTRANK, cfg: Optional[RankConfig] = None) -> List[float]:
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method}")
    # each method starts from its own baseline, whatever the sentences held before
    for s in doc.sentences:
        s.score = INITIAL_SCORES[method]
    if method == METHOD_TEXTRANK:
        return textrank_scores(doc, cfg=cfg)
    return tfisf_scores(doc)
