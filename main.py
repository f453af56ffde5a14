from __future__ import annotations
import streamlit as st
import re
import logging
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import networkx as nx
import io

from lexrank_summary.summarize import run_pipeline
from lexrank_summary.graphing import to_networkx
from lexrank_summary.datatypes import PipelineTrace, SummaryResult

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

def extract_markdown_text(md_content):
    """Strip Markdown markup, keeping the prose."""
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    return text.strip()

def load_text_from_file(uploaded_file):
    """Read an uploaded .txt or .md file as plain text."""
    content = uploaded_file.read().decode("utf-8")
    if uploaded_file.name.lower().endswith('.md'):
        return extract_markdown_text(content)
    return content

def _preview(text: str, width: int = 80) -> str:
    return text[:width] + "..." if len(text) > width else text

def draw_similarity_graph(trace: PipelineTrace):
    """Draw the thresholded similarity graph; selected sentences in yellow, node size by LexRank score."""
    G = to_networkx(trace.similarity, trace.unique_sentences)
    selected = {s.index for s in trace.selected}

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title("Sentence Similarity Graph", fontsize=14, fontweight='bold')

    pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
    scores = trace.scores if trace.scores is not None else np.ones(len(G.nodes))
    top = float(scores.max()) if len(scores) and scores.max() > 0 else 1.0
    sizes = [400 + 1200 * float(scores[i]) / top for i in G.nodes()]
    colors = ['yellow' if G.nodes[i]['index'] in selected else 'lightblue' for i in G.nodes()]
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=sizes, alpha=0.8)

    edges = G.edges(data=True)
    if edges:
        weights = [d['weight'] for _, _, d in edges]
        max_weight = max(weights)
        nx.draw_networkx_edges(G, pos, ax=ax,
                               width=[3 * (w / max_weight) for w in weights],
                               alpha=0.6, edge_color='gray')
        if len(G.nodes) <= 10:
            edge_labels = {(u, v): f"{d['weight']:.2f}" for u, v, d in G.edges(data=True)}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

    labels = {i: f"S{G.nodes[i]['index']+1}" for i in G.nodes()}
    nx.draw_networkx_labels(G, pos, labels, ax=ax, font_size=10, font_weight='bold')
    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    st.sidebar.header("Parameters")
    max_sentences = st.sidebar.slider("Max sentences", min_value=1, max_value=10, value=5, step=1,
                                      help="Requested summary length; capped by document size")
    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show every pipeline stage")
    return max_sentences, debug_mode

def show_stages(trace: PipelineTrace):
    st.header("Step 1: Segmentation & Deduplication")
    with st.expander("Sentences", expanded=True):
        unique = {s.index for s in trace.unique_sentences}
        col1, col2 = st.columns(2)
        col1.metric("Sentences", len(trace.sentences))
        col2.metric("After Dedup", len(trace.unique_sentences))
        st.dataframe(pd.DataFrame([{
            "Sentence #": s.index + 1,
            "Kept": "✅" if s.index in unique else "❌ duplicate",
            "Text": s.text,
        } for s in trace.sentences]), use_container_width=True)

    if trace.early_exit:
        st.info(f"Pipeline exited early ({trace.early_exit}); ranking skipped.")
        return

    st.header("Step 2: TF-IDF Vectors")
    with st.expander("TF-IDF Details", expanded=False):
        st.metric("Vocabulary Size", len(trace.vocabulary))
        st.dataframe(pd.DataFrame({"Term": trace.vocabulary, "IDF": trace.idf}), use_container_width=True, height=200)
        rows = [f"S{s.index+1}" for s in trace.unique_sentences]
        st.dataframe(pd.DataFrame(trace.tfidf, index=rows, columns=trace.vocabulary), use_container_width=True)

    st.header("Step 3: Similarity Graph")
    with st.expander("Graph Details", expanded=True):
        n = trace.similarity.shape[0]
        edges = int(np.count_nonzero(trace.similarity)) // 2
        max_edges = n * (n - 1) // 2
        col1, col2, col3 = st.columns(3)
        col1.metric("Nodes", n)
        col2.metric("Edges", edges)
        col3.metric("Density", f"{(edges / max_edges if max_edges else 0):.2%}")
        rows = [f"S{s.index+1}" for s in trace.unique_sentences]
        st.dataframe(pd.DataFrame(trace.similarity, index=rows, columns=rows), use_container_width=True)
        try:
            st.image(draw_similarity_graph(trace), caption="Yellow nodes were selected; size follows LexRank score")
        except Exception as e:
            st.error(f"Could not generate graph visualization: {str(e)}")

    st.header("Step 4: Scoring & Selection")
    with st.expander("Scoring Details", expanded=True):
        chosen = {s.index for s in trace.selected}
        st.write(f"**Effective max sentences:** {trace.max_sentences}")
        st.dataframe(pd.DataFrame([{
            "Sentence #": c.sentence.index + 1,
            "LexRank": f"{c.rank_score:.4f}",
            "Quality": f"{c.quality_score:.2f}",
            "Combined": f"{c.combined:.4f}",
            "Selected": "✅" if c.sentence.index in chosen else "❌",
            "Text Preview": _preview(c.sentence.text),
        } for c in trace.candidates]), use_container_width=True)

def show_summary(result: SummaryResult):
    st.header(result.title)
    if result.key_points:
        st.subheader("Key Points")
        st.markdown("\n".join(f"- {p}" for p in result.key_points))
    for section in result.sections:
        st.subheader(section.heading)
        if section.content:
            st.write(section.content)
        for p in section.points or []:
            st.markdown(f"- {p}")
    col1, col2 = st.columns(2)
    col1.metric("Total Sentences", result.total_sentences)
    col2.metric("Summary Ratio", f"{result.summary_ratio:.0%}")
    with st.expander("JSON"):
        st.json(result.to_dict())

def main():
    st.title("LexRank Summarizer")
    st.write("Upload or paste text to inspect the extractive summarization pipeline")

    max_sentences, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader("Choose a text file", type=['txt', 'md'])
    text = load_text_from_file(uploaded_file) if uploaded_file is not None else ""
    text = st.text_area("Content", text, height=200)
    title = st.text_input("Document title", value="")

    if st.button("Generate Summary", type="primary"):
        try:
            with st.spinner("Generating summary..."):
                trace = run_pipeline(text, title=title, max_sentences=max_sentences)
            if debug_mode:
                st.markdown("---")
                st.title("Pipeline Debug Mode")
                show_stages(trace)
            st.markdown("---")
            show_summary(trace.result)
        except Exception as e:
            st.error(f"Error generating summary: {str(e)}")
            st.exception(e)

if __name__ == "__main__":
    main()
