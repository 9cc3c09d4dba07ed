from __future__ import annotations
import streamlit as st
import numpy as np

from textsum.config import SummarizerConfig
from textsum.preprocessing import PreprocessConfig, preprocess_text
from textsum.features import compute_similarity_matrix, compute_term_stats
from textsum.graphing import build_graph, draw_graph
from textsum.loaders import convert_text
from textsum.report import sentence_table, term_table, similarity_frame
from textsum.scoring import RankConfig, METHOD_TEXTRANK, METHOD_TFISF, INITIAL_SCORES, textrank_scores, tfisf_scores
from textsum.summarize import summary_size, select_sentences

def load_text_from_file(uploaded_file) -> str:
    """Load text content from uploaded file based on file type."""
    content = uploaded_file.read().decode("utf-8")
    return convert_text(content, uploaded_file.name)

def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    st.sidebar.header("Method")
    method = st.sidebar.radio(
        "Scoring strategy",
        [METHOD_TEXTRANK, METHOD_TFISF],
        help="textrank: similarity-graph propagation, tfisf: term weights",
    )
    if method == METHOD_TEXTRANK:
        length = st.sidebar.slider("Summary percentage", min_value=0.0, max_value=100.0, value=20.0, step=5.0)
    else:
        length = st.sidebar.number_input("Sentences to keep", min_value=0, value=3, step=1)

    st.sidebar.header("Parameters")
    damping = st.sidebar.slider("Damping factor", min_value=0.0, max_value=1.0, value=0.85, step=0.05)
    iterations = st.sidebar.number_input("Iterations", min_value=0, max_value=200, value=20, step=1)
    synchronous = st.sidebar.checkbox("Synchronous updates", value=True,
                                      help="Unchecked: scores are updated in place during a round")
    threshold = st.sidebar.slider("Graph edge threshold", min_value=0.0, max_value=2.0, value=0.0, step=0.05,
                                  help="Only used for the graph picture")

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")

    config = SummarizerConfig(
        preprocess=PreprocessConfig(),
        rank=RankConfig(damping=damping, iterations=int(iterations), synchronous=synchronous),
    )
    return method, length, config, threshold, debug_mode

def run_pipeline(text: str, method: str, length, config: SummarizerConfig, threshold: float, debug_mode: bool):
    """Run the pipeline, showing intermediate state when debugging."""
    doc = preprocess_text(text, cfg=config.preprocess, initial_score=INITIAL_SCORES[method])
    n = len(doc.sentences)

    if debug_mode:
        st.header("Step 1: Tokenization")
        total_tokens = sum(len(s.tokens) for s in doc.sentences)
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Total Sentences", n)
        with col2:
            st.metric("Total Tokens (processed)", total_tokens)

    if method == METHOD_TEXTRANK:
        simM = compute_similarity_matrix(doc)
        textrank_scores(doc, sim_matrix=simM, cfg=config.rank)
        k = summary_size(n, float(length))
    else:
        stats = compute_term_stats(doc)
        tfisf_scores(doc, term_stats=stats)
        k = int(length)

    selected = select_sentences(doc, k)
    chosen = [s.idx for s in selected]

    if debug_mode:
        st.header("Step 2: Scoring")
        if method == METHOD_TEXTRANK:
            if n <= 50:
                st.subheader("Sentence Similarity Matrix")
                st.dataframe(similarity_frame(simM), use_container_width=True)
            elif n > 1:
                flat_sim = simM[np.triu_indices(n, k=1)]
                col1, col2 = st.columns(2)
                with col1:
                    st.metric("Mean Similarity", f"{np.mean(flat_sim):.3f}")
                with col2:
                    st.metric("Max Similarity", f"{np.max(flat_sim):.3f}")
            if n <= 50:
                st.subheader("Graph Visualization")
                graph = build_graph(doc, simM, threshold=threshold)
                st.image(draw_graph(graph, selected=chosen), caption="Selected sentences in gold")
        else:
            st.subheader("Term Weights")
            st.dataframe(term_table(stats), use_container_width=True, height=200)

        st.header("Step 3: Selection")
        st.dataframe(sentence_table(doc, selected=chosen), use_container_width=True)
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Target Sentences", k)
        with col2:
            st.metric("Actually Selected", len(selected))

    return "\n".join(s.text for s in selected)

def main():
    st.title("Extractive Text Summarizer")
    st.write("Upload a text file to summarize it by TextRank or TF-ISF sentence scoring")

    method, length, config, threshold, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'rtf', 'md'],
        help="Upload a text file to summarize (supports .txt, .rtf, .md formats)"
    )

    if uploaded_file is not None:
        text = load_text_from_file(uploaded_file)
        st.subheader("Original Text")
        st.text_area("Content", text, height=200, disabled=True)

        if st.button("Generate Summary", type="primary"):
            try:
                result = run_pipeline(text, method, length, config, threshold, debug_mode)
                st.markdown("---")
                st.header("Final Summary")
                st.text_area("Generated Summary", result, height=150, disabled=True)

                col1, col2 = st.columns(2)
                with col1:
                    st.metric("Original Length", len(text.split()))
                with col2:
                    st.metric("Summary Length", len(result.split()) if result else 0)
            except ValueError as e:
                st.error(f"Error generating summary: {str(e)}")

if __name__ == "__main__":
    main()
