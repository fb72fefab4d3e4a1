"""Feature extraction for question classification."""

from __future__ import annotations

import re

from qa_engine.config.constants import WH_WORDS


def question_features(text: str) -> list[str]:
    """Map a question to a bag of string features.

    Stop words are kept here: wh-words and auxiliaries ("how many", "who is")
    carry most of the answer-type signal.
    """
    tokens = re.findall(r"\w+", text.lower())
    if not tokens:
        return []

    features = [f"w:{t}" for t in tokens]

    wh_index = next((i for i, t in enumerate(tokens) if t in WH_WORDS), None)
    if wh_index is not None:
        wh = tokens[wh_index]
        features.append(f"wh:{wh}")
        if wh_index + 1 < len(tokens):
            features.append(f"head:{wh}_{tokens[wh_index + 1]}")
    else:
        features.append("wh:none")

    features.extend(f"b:{a}_{b}" for a, b in zip(tokens, tokens[1:]))
    features.append(f"len:{min(len(tokens) // 4, 3)}")
    return features
