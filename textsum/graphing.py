from __future__ import annotations
from typing import Iterable, List, Optional
import io
import matplotlib.pyplot as plt
import networkx as nx
import numpy as np
from .datatypes import Document, Graph, Edge

def build_graph(doc: Document, sim_matrix: np.ndarray, threshold: float = 0.0) -> Graph:
    nodes = doc.sentences
    edges: List[Edge] = []
    n = len(nodes)
    for i in range(n):
        for j in range(i+1, n):
            w = float(sim_matrix[i][j])
            if w > 0.0 and w >= threshold:
                edges.append(Edge(i=i, j=j, weight=w))
    return Graph(nodes=nodes, edges=edges)

def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    for s in graph.nodes:
        G.add_node(s.idx, text=s.text, score=s.score)
    for e in graph.edges:
        G.add_edge(e.i, e.j, weight=e.weight)
    return G

def draw_graph(graph: Graph, selected: Optional[Iterable[int]] = None) -> io.BytesIO:
    """Render the sentence graph as a PNG; selected sentences are highlighted."""
    G = to_networkx(graph)
    chosen = set(selected or [])
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_title("Sentence Similarity Graph", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
        # node size follows the sentence score
        scores = [G.nodes[i]['score'] for i in G.nodes]
        top = max(max(scores), 1e-9)
        sizes = [300 + 900 * max(s, 0.0) / top for s in scores]
        colors = ['gold' if i in chosen else 'lightblue' for i in G.nodes]
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=sizes, alpha=0.8)

        edges = list(G.edges(data=True))
        if edges:
            weights = [d['weight'] for _, _, d in edges]
            max_weight = max(weights)
            nx.draw_networkx_edges(G, pos, ax=ax,
                                   width=[3 * (w / max_weight) for w in weights],
                                   alpha=0.6,
                                   edge_color='gray')

        labels = {i: f"S{i+1}" for i in G.nodes}
        nx.draw_networkx_labels(G, pos, labels, ax=ax, font_size=10, font_weight='bold')

    ax.axis('off')
    fig.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf
