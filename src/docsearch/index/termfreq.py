"""Term frequency accumulation for a single document."""

from __future__ import annotations

from typing import Iterable, List, Tuple, Union

from docsearch.models import TermFreq, Token
from docsearch.utils.text import iter_tokens, normalize_term


def build_term_freq(tokens: Iterable[Union[Token, str]]) -> TermFreq:
    """Count uppercase terms, one per token occurrence."""
    tf: TermFreq = {}
    for token in tokens:
        term = normalize_term(token)
        tf[term] = tf.get(term, 0) + 1
    return tf


def index_document(text: str) -> TermFreq:
    """Tokenize ``text`` and return its term frequencies."""
    return build_term_freq(iter_tokens(text))


def top_terms(tf: TermFreq, n: int) -> List[Tuple[str, int]]:
    """Return the ``n`` most frequent terms, ties broken alphabetically."""
    if n <= 0:
        return []
    ranked = sorted(tf.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:n]
