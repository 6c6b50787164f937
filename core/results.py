"""Final WPM and accuracy calculation."""

import math

from core.models import Results


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def calculate_wpm(correct_words: int, session_length_sec: int) -> int:
    """Calculate words per minute from correctly typed words.

    For the standard 60-second test this is simply the correct word count.

    Args:
        correct_words: Number of correctly typed words
        session_length_sec: Test length in seconds

    Returns:
        WPM, or 0 if the session length is zero
    """
    if session_length_sec <= 0:
        return 0
    return round_half_up(correct_words * 60 / session_length_sec)


def calculate_accuracy(correct_words: int, total_words: int) -> int:
    """Calculate word accuracy in percent.

    Args:
        correct_words: Correctly typed words
        total_words: All committed words

    Returns:
        Accuracy 0-100, or 0 if no word was judged
    """
    if total_words <= 0:
        return 0
    return round_half_up(100 * correct_words / total_words)


def calculate_results(
    correct_words: int, total_words: int, session_length_sec: int = 60
) -> Results:
    return Results(
        wpm=calculate_wpm(correct_words, session_length_sec),
        accuracy_percent=calculate_accuracy(correct_words, total_words),
        correct_word_count=correct_words,
        total_words_judged=total_words,
    )
