from __future__ import annotations

import math

from .features import split_sentences
from .sentiment import comparative


def extract_relevant_quotes(text: str, count: int = 3) -> list[str]:
    """Pick the most positive and most negative sentences, topped up with neutral ones.

    Any slots still open are filled with the remaining sentences in document
    order, so a text with more than ``count`` sentences always yields ``count``.
    """
    sentences = split_sentences(text)
    if len(sentences) <= count:
        return sentences

    scores = [comparative(sentence) for sentence in sentences]
    order = range(len(sentences))
    positive = sorted((i for i in order if scores[i] > 0), key=lambda i: scores[i], reverse=True)
    negative = sorted((i for i in order if scores[i] < 0), key=lambda i: scores[i])

    picked = positive[: math.ceil(count / 2)] + negative[: count // 2]
    for i in [i for i in order if scores[i] == 0] + list(order):
        if len(picked) >= count:
            break
        if i not in picked:
            picked.append(i)
    return [sentences[i] for i in picked]
