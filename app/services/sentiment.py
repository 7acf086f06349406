"""Keyword sentiment scoring for interview feedback.

A deliberately simple rule table, not a classifier. Each listed word adds or
subtracts one point if it appears anywhere in the lower-cased text, counted
once per word no matter how often it occurs. Matching is by substring, so
"fit" also fires on "benefit" and the word "positive" itself scores.
"""

from dataclasses import dataclass

POSITIVE_WORDS = ("great", "good", "excellent", "strong", "impressive", "fit", "positive", "outstanding")
NEGATIVE_WORDS = ("poor", "bad", "weak", "concern", "negative", "lack", "insufficient")

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"


@dataclass(frozen=True)
class SentimentResult:
    score: int
    label: str


def label_for(score: int) -> str:
    if score > 0:
        return POSITIVE
    if score < 0:
        return NEGATIVE
    return NEUTRAL


def score_sentiment(text: str) -> SentimentResult:
    lowered = (text or "").lower()
    score = 0
    for word in POSITIVE_WORDS:
        if word in lowered:
            score += 1
    for word in NEGATIVE_WORDS:
        if word in lowered:
            score -= 1
    return SentimentResult(score=score, label=label_for(score))
