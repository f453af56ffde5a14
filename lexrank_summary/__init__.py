import logging

from .datatypes import RawDocument, Sentence, Candidate, Section, SummaryResult, PipelineTrace
from .preprocessing import clean_text, split_sentences, segment, normalize, tokenize
from .dedup import levenshtein, string_similarity, remove_duplicates
from .features import build_vocabulary, compute_tfidf_vectors
from .graphing import cosine_similarity, build_similarity_matrix, to_networkx
from .scoring import transition_matrix, lexrank, sentence_quality
from .selection import build_candidates, select_diverse_sentences
from .summarize import summarize, run_pipeline, format_result, adaptive_max_sentences

logging.getLogger(__name__).addHandler(logging.NullHandler())
