# services/scoring_service.py
from typing import Dict

from core.models import ScoreSet, validate_scores
from core.principles import PRINCIPLE_KEYS, MAX_SCORE, EXERCISES, Exercise

def compute_aggregate_percent(scores: ScoreSet) -> float:
    """Sum of the six scores over the maximum, as a percentage.

    Scores start at 1, so the floor is 6/60 = 10%, never 0.
    """
    scores = validate_scores(scores)
    return sum(scores.values()) / (len(PRINCIPLE_KEYS) * MAX_SCORE) * 100.0

def principle_percent(score: int) -> float:
    return float(score) / MAX_SCORE * 100.0

def principle_percents(scores: ScoreSet) -> Dict[str, float]:
    scores = validate_scores(scores)
    return {k: principle_percent(scores[k]) for k in PRINCIPLE_KEYS}

def recommend(scores: ScoreSet) -> str:
    """Key of the lowest score; ties go to the earliest key in PRINCIPLE_KEYS."""
    scores = validate_scores(scores)
    return min(PRINCIPLE_KEYS, key=lambda k: (scores[k], PRINCIPLE_KEYS.index(k)))

def recommend_exercise(scores: ScoreSet) -> Exercise:
    return EXERCISES[recommend(scores)]
