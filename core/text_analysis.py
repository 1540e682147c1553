# =============================================================================
# core/text_analysis.py  -  Text Analytics Engine
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Tokenizes a block of text and aggregates statistics over it: counts of
#   characters, words, sentences and paragraphs, average lengths, the five
#   most common words and an estimated reading time.
#
# TOKENIZATION RULES:
#   - words:      runs of whitespace separate words
#   - sentences:  runs of '.', '!' or '?' end a sentence; blank fragments drop
#   - paragraphs: two or more consecutive newlines separate paragraphs
#
# WORD FREQUENCY:
#   Each word is lowercased and stripped of non-word characters (anything but
#   ASCII letters, digits and underscore).  Words that end up empty are not
#   counted.  Ties in the top-5 list keep first-occurrence order.
# =============================================================================

import math
import re
from collections import Counter

from core.models import TextStatistics, WordCount
from core.units import round_2dp

WORDS_PER_MINUTE = 200
TOP_WORDS = 5

_SENTENCE_BREAKS = re.compile(r"[.!?]+")
_PARAGRAPH_BREAKS = re.compile(r"\n\n+")
_NON_WORD = re.compile(r"[^A-Za-z0-9_]")
_WHITESPACE = re.compile(r"\s")


def word_frequencies(words: list[str]) -> Counter:
    """Count normalized words, keeping first-occurrence order."""
    counts: Counter = Counter()
    for word in words:
        clean = _NON_WORD.sub("", word.lower())
        if clean:
            counts[clean] += 1
    return counts


def analyze(text: str) -> TextStatistics:
    """Compute word, sentence and paragraph statistics for ``text``.

    Empty input is valid: every count and average is zero.
    """
    words = text.split()
    sentences = [s for s in _SENTENCE_BREAKS.split(text) if s.strip()]
    paragraphs = [p for p in _PARAGRAPH_BREAKS.split(text) if p.strip()]

    # Counter.most_common orders equal counts by insertion, i.e. first occurrence.
    most_common = [
        WordCount(word=word, count=count)
        for word, count in word_frequencies(words).most_common(TOP_WORDS)
    ]

    word_count = len(words)
    if word_count:
        avg_word_length = sum(len(w) for w in words) / word_count
    else:
        avg_word_length = 0.0
    avg_sentence_length = word_count / len(sentences) if sentences else 0.0

    return TextStatistics(
        characters=len(text),
        characters_no_spaces=len(_WHITESPACE.sub("", text)),
        words=word_count,
        sentences=len(sentences),
        paragraphs=len(paragraphs),
        average_word_length=round_2dp(avg_word_length),
        average_sentence_length=round_2dp(avg_sentence_length),
        most_common_words=most_common,
        reading_time_minutes=math.ceil(word_count / WORDS_PER_MINUTE),
    )
