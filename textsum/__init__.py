from .datatypes import Sentence, Document, TermStat, Edge, Graph
from .preprocessing import STOPWORDS, PreprocessConfig, is_stopword, split_sentences, tokenize, preprocess_text
from .features import similarity, token_similarity, compute_similarity_matrix, compute_term_stats
from .scoring import RankConfig, METHOD_TEXTRANK, METHOD_TFISF, textrank_scores, tfisf_scores, score_sentences
from .config import SummarizerConfig
from .summarize import summary_size, rank_sentences, select_sentences, generate_summary, format_summary, summarize, summarize_text
