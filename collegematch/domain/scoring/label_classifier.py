"""
Label Classifier

Classifies colleges as Safety, Target, or Reach from the match score alone.
"""

from collegematch.domain.scoring.interfaces import FitCategory


class LabelClassifier:
    """
    Fit category classifier.

    Thresholds are checked in order, first match wins:
    - Safety: score >= 85
    - Target: score >= 65
    - Reach: everything else
    """

    SAFETY_THRESHOLD = 85
    TARGET_THRESHOLD = 65

    def classify(self, match_score: int) -> FitCategory:
        if match_score >= self.SAFETY_THRESHOLD:
            return FitCategory.SAFETY
        elif match_score >= self.TARGET_THRESHOLD:
            return FitCategory.TARGET
        else:
            return FitCategory.REACH
