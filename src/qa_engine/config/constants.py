"""Static lexicons and defaults shared across stages."""

from __future__ import annotations

WH_WORDS = frozenset({
    "who", "whom", "whose", "what", "which", "when", "where", "why", "how",
})

STOPWORDS = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and",
    "any", "are", "as", "at", "be", "because", "been", "before", "being", "below",
    "between", "both", "but", "by", "can", "could", "did", "do", "does", "doing",
    "down", "during", "each", "few", "for", "from", "further", "had", "has", "have",
    "having", "he", "her", "here", "hers", "herself", "him", "himself", "his", "i",
    "if", "in", "into", "is", "it", "its", "itself", "me", "more", "most", "my",
    "myself", "name", "no", "nor", "not", "of", "off", "on", "once", "only", "or",
    "other", "our", "ours", "ourselves", "out", "over", "own", "same", "she",
    "should", "so", "some", "such", "than", "that", "the", "their", "theirs",
    "them", "themselves", "then", "there", "these", "they", "this", "those",
    "through", "to", "too", "under", "until", "up", "very", "was", "we", "were",
    "while", "with", "would", "you", "your", "yours", "yourself", "yourselves",
}) | WH_WORDS

# Coarse UIUC question classification labels
UIUC_COARSE_LABELS = {
    "ABBR": "OTHER",
    "DESC": "OTHER",
    "ENTY": "OTHER",
    "HUM": "PERSON",
    "LOC": "LOCATION",
    "NUM": "NUMBER",
}

# Fine labels that override the coarse mapping
UIUC_FINE_LABELS = {
    "NUM:date": "DATE",
    "DESC:def": "DEFINITION",
}

MONTHS = (
    "january", "february", "march", "april", "may", "june", "july",
    "august", "september", "october", "november", "december",
)

NUMBER_WORDS = frozenset({
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "eleven", "twelve", "twenty", "thirty", "forty", "fifty", "hundred",
    "thousand", "million", "billion", "dozen",
})

PERSON_CUES = frozenset({"by", "mr", "mrs", "ms", "dr", "prof", "president", "king", "queen"})
LOCATION_CUES = frozenset({"in", "at", "near", "from", "to", "of"})
DEFINITION_CUES = frozenset({"is", "are", "was", "were"})

ARTIFACT_FORMAT_VERSION = 1
