from __future__ import annotations
import logging
import re
from typing import List

from .config import BUFFER_LIMITS, SUMMARY_LIMITS
from .datatypes import Sentence

logger = logging.getLogger(__name__)

RE_WHITESPACE = re.compile(r'\s+')
RE_FRAGMENT   = re.compile(r'\b(\w+)\s+(\w{1,3})\b')       # word followed by a short fragment
RE_BREAK      = re.compile(r'([.!?])\s*([A-Z])')           # terminal mark, then a capital
RE_PHONE      = re.compile(r'\d{10,}')
RE_TERMINAL   = re.compile(r'[.!?]$')
RE_NUMERIC    = re.compile(r'^\d+$')
RE_JOB_TITLE  = re.compile(r'^(CEO|VP|Director|Manager|Officer)\s+', re.I)
RE_NON_WORD   = re.compile(r'[^\w\s]')

PHONE_PLACEHOLDER = '[PHONE]'

STOPWORDS = {
    # fixed English list; not derived from any corpus
    'the','a','an','and','or','but','in','on','at','to','for','of','with','by',
    'is','are','was','were','be','been','being','have','has','had','do','does','did',
    'will','would','could','should','may','might','must','can','this','that','these',
    'those','i','you','he','she','it','we','they','me','him','her','us','them'
}

def _repair_fragment(m: re.Match) -> str:
    # Best effort only: upstream extraction sometimes splits "care ful" or "look ing".
    word, fragment = m.group(1), m.group(2)
    if len(word) > 3:
        if fragment == 'ful' and not word.endswith('ful'):
            # joins the fragment ("care ful" -> "careful"), never truncates to word + 'l'
            return word + fragment
        if fragment == 'ing' and re.search(r'[aeiou]k$', word):
            return word + fragment
    return m.group(0)

def clean_text(text: str) -> str:
    """Normalize whitespace, repair split words, mark sentence breaks with newlines."""
    cleaned = RE_WHITESPACE.sub(' ', text)
    cleaned = RE_FRAGMENT.sub(_repair_fragment, cleaned)
    cleaned = RE_BREAK.sub(r'\1\n\2', cleaned)
    cleaned = RE_PHONE.sub(PHONE_PLACEHOLDER, cleaned)
    return cleaned.strip()

def _keep_segment(s: str) -> bool:
    if len(s) <= SUMMARY_LIMITS.min_sentence_length:
        return False
    if not RE_TERMINAL.search(s):
        return False
    if RE_NUMERIC.match(s):
        return False
    if RE_JOB_TITLE.match(s):
        return False
    return True

def split_sentences(text: str, limit: int = BUFFER_LIMITS.summarization_sentences) -> List[str]:
    # Heuristic boundaries: "Dr. Smith" splits, "e.g. the" does not.
    parts = [p.strip() for p in clean_text(text).split('\n')]
    kept = [p for p in parts if _keep_segment(p)]
    if len(kept) > limit:
        logger.debug("segment: capped=%d from=%d", limit, len(kept))
    return kept[:limit]

def segment(text: str) -> List[Sentence]:
    return [Sentence(index=i, text=s) for i, s in enumerate(split_sentences(text))]

def normalize(text: str) -> str:
    """Comparison key: lowercase, punctuation stripped, whitespace collapsed."""
    lowered = RE_NON_WORD.sub('', text.lower())
    return RE_WHITESPACE.sub(' ', lowered).strip()

def tokenize(text: str) -> List[str]:
    toks = RE_NON_WORD.sub(' ', text.lower()).split()
    return [t for t in toks if len(t) > 2 and t not in STOPWORDS]
