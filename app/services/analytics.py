"""
Learner analytics service

Computes the summary numbers shown on the analytics dashboard
"""
from collections import Counter
from typing import Iterable

from app.core.options import BARANGAY_OPTIONS
from app.database.schemas import Learner, LearnerStats


def compute_learner_stats(learners: Iterable[Learner]) -> LearnerStats:
    """
    Compute learner statistics

    Args:
        learners: Learner records to summarize

    Returns:
        LearnerStats with sex, 4P's, IP and schooling counts, learners per
        barangay (every configured barangay listed), age brackets, the five
        most common mother tongues and the last-grade distribution
    """
    learners = list(learners)
    total = len(learners)
    studying = sum(1 for l in learners if l.currently_studying == "Yes")

    by_barangay = {barangay: 0 for barangay in BARANGAY_OPTIONS}
    for learner in learners:
        if learner.barangay in by_barangay:
            by_barangay[learner.barangay] += 1

    tongues = Counter(l.mother_tongue for l in learners if l.mother_tongue)
    grades = Counter(l.last_grade_completed for l in learners if l.last_grade_completed)

    return LearnerStats(
        total=total,
        male=sum(1 for l in learners if l.sex == "Male"),
        female=sum(1 for l in learners if l.sex == "Female"),
        four_ps=sum(1 for l in learners if l.is_4ps_member),
        ip=sum(1 for l in learners if l.is_ip),
        studying=studying,
        not_studying=total - studying,
        by_barangay=by_barangay,
        youth=sum(1 for l in learners if 6 <= l.age <= 17),
        adult=sum(1 for l in learners if 18 <= l.age <= 59),
        senior=sum(1 for l in learners if l.age >= 60),
        top_mother_tongues=tongues.most_common(5),
        grade_distribution=grades.most_common(),
    )
