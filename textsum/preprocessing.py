from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional
from .datatypes import Document, Sentence

logger = logging.getLogger(__name__)

STOPWORDS: FrozenSet[str] = frozenset({
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to',
    'for', 'of', 'with', 'by', 'from', 'up', 'about', 'into', 'over', 'after',
})

# a sentence ends at the first delimiter; a run like "..." or "?!" stays with it
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_WORD_SPLIT_RE = re.compile(r"""[\s,.\-!?()\[\]{}:;"']+""")

@dataclass
class PreprocessConfig:
    lowercase: bool = True
    remove_stopwords: bool = True
    stop_words: FrozenSet[str] = field(default_factory=lambda: STOPWORDS)
    max_sentences: Optional[int] = None  # None = unbounded

    def __post_init__(self):
        self.stop_words = frozenset(w.lower() for w in self.stop_words)
        if self.max_sentences is not None and self.max_sentences < 0:
            raise ValueError(f"max_sentences must be >= 0, got {self.max_sentences}")

def is_stopword(word: str, stop_words: Optional[Iterable[str]] = None) -> bool:
    """Membership test against an already lower-cased word."""
    if stop_words is None:
        stop_words = STOPWORDS
    return word in stop_words

def split_sentences(text: str, max_sentences: Optional[int] = None) -> List[str]:
    """
    Scan ``text`` for sentence delimiters (. ! ?).

    Each sentence includes its closing delimiter run. Whitespace before a
    sentence is skipped, and a trailing fragment without a delimiter becomes
    the last sentence if it holds anything but whitespace.
    """
    sentences: List[str] = []
    pos, n = 0, len(text)
    while pos < n:
        if max_sentences is not None and len(sentences) >= max_sentences:
            break
        while pos < n and text[pos].isspace():
            pos += 1
        if pos >= n:
            break
        m = _SENTENCE_END_RE.search(text, pos)
        if m is None:
            tail = text[pos:].rstrip()
            if tail:
                sentences.append(tail)
            break
        sentences.append(text[pos:m.end()])
        pos = m.end()
    return sentences

def tokenize(text: str, cfg: Optional[PreprocessConfig] = None) -> List[str]:
    cfg = cfg or PreprocessConfig()
    toks = _WORD_SPLIT_RE.split(text)
    if cfg.lowercase:
        toks = [t.lower() for t in toks]
    toks = [t for t in toks if t]
    if cfg.remove_stopwords:
        toks = [t for t in toks if not is_stopword(t, cfg.stop_words)]
    return toks

def preprocess_text(text: str, cfg: Optional[PreprocessConfig] = None, initial_score: float = 0.0) -> Document:
    cfg = cfg or PreprocessConfig()
    sentences = [
        Sentence(idx=i, text=s, score=initial_score, tokens=tokenize(s, cfg))
        for i, s in enumerate(split_sentences(text, cfg.max_sentences))
    ]
    logger.debug("split %d characters into %d sentences", len(text), len(sentences))
    return Document(raw_text=text, sentences=sentences)
