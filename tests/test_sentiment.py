import pytest

from app.services.sentiment import label_for, score_sentiment


def test_positive_words_add_one_each():
    result = score_sentiment("Great communication and a strong portfolio")
    assert result.score == 2
    assert result.label == "positive"


def test_negative_words_subtract_one_each():
    result = score_sentiment("Weak system design, lack of ownership")
    assert result.score == -2
    assert result.label == "negative"


def test_repeated_word_counts_once():
    assert score_sentiment("good good good").score == 1


def test_matching_is_case_insensitive_substring():
    # "fit" fires inside "benefit"
    assert score_sentiment("Clear BENEFIT to the team").score == 1


def test_mixed_feedback_nets_out():
    result = score_sentiment("Excellent coder but one concern about testing")
    assert result.score == 0
    assert result.label == "neutral"


def test_empty_text_is_neutral():
    assert score_sentiment("").label == "neutral"
    assert score_sentiment(None).score == 0


@pytest.mark.parametrize("score,label", [(3, "positive"), (0, "neutral"), (-1, "negative")])
def test_label_for(score, label):
    assert label_for(score) == label
