from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

@dataclass
class Sentence:
    idx: int  # position in the document, stable across sorts
    text: str
    score: float = 0.0
    tokens: List[str] = field(default_factory=list)

@dataclass
class Document:
    raw_text: str
    sentences: List[Sentence]

@dataclass(frozen=True)
class TermStat:
    term: str
    document_frequency: int  # occurrences across the whole document
    weight: float

@dataclass
class Edge:
    i: int
    j: int
    weight: float  # similarity

@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge]  # undirected weighted edges
