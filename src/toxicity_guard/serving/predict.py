"""Single-row scoring bound to a loaded model."""

from __future__ import annotations

import heapq

import numpy as np

from ..utils import get_logger, json_log
from .loader import ModelArtifact
from .schemas import FeatureContribution, SentimentIssue, SentimentPrediction

log = get_logger(__name__)


class ModelExplainError(RuntimeError):
    """Raised when model does not support explanation (e.g., non-linear, no coef_)."""


class PredictionEngine:
    """
    Scoring interface over a loaded pipeline.

    ``predict`` takes one row and returns one row; ``predict_many`` scores
    several rows in a single vectorized call.
    """

    def __init__(self, artifact: ModelArtifact) -> None:
        self._model = artifact.model
        classes = list(self._model.classes_)
        if True not in classes:
            raise ValueError(f'Model classes {classes} do not include the toxic label')
        self._toxic_idx = classes.index(True)

    def predict(self, issue: SentimentIssue) -> SentimentPrediction:
        return self.predict_many([issue])[0]

    def predict_many(self, issues: list[SentimentIssue]) -> list[SentimentPrediction]:
        if not issues:
            return []

        texts = [issue.text for issue in issues]
        scores = self._model.decision_function(texts)
        probas = self._model.predict_proba(texts)[:, self._toxic_idx]

        results = [
            SentimentPrediction(
                prediction=bool(scores[i] > 0),
                probability=float(probas[i]),
                score=float(scores[i]),
            )
            for i in range(len(texts))
        ]
        log.debug(json_log('predict.completed', component='serving.predict', rows=len(results)))
        return results


def _get_classifier_coefficients(classifier) -> np.ndarray:
    if hasattr(classifier, 'coef_'):
        return np.asarray(classifier.coef_).ravel()
    raise ModelExplainError(
        f'Classifier {type(classifier).__name__} does not support coefficient extraction'
    )


def explain_prediction(
    issue: SentimentIssue,
    artifact: ModelArtifact,
    top_k: int = 10,
) -> list[FeatureContribution]:
    """
    Return the top-k features behind a prediction, by absolute contribution.

    Positive contributions push towards toxic.

    Raises:
        ModelExplainError: If the pipeline is not a featurizer + linear classifier.
    """
    pipeline = artifact.model
    if len(pipeline.steps) < 2:
        raise ModelExplainError(
            'Pipeline must have at least 2 steps (vectorizer + classifier)'
        )

    vectorizer = pipeline.steps[0][1]
    classifier = pipeline.steps[-1][1]

    if not hasattr(vectorizer, 'get_feature_names_out'):
        raise ModelExplainError(
            f'Vectorizer {type(vectorizer).__name__} does not support feature names'
        )

    feature_names = vectorizer.get_feature_names_out()
    coefficients = _get_classifier_coefficients(classifier)

    row = vectorizer.transform([issue.text]).tocsr().getrow(0)
    contributions = [
        (str(feature_names[j]), float(row.data[k] * coefficients[j]))
        for k, j in enumerate(row.indices)
    ]

    top_features = heapq.nlargest(
        min(top_k, len(contributions)),
        contributions,
        key=lambda x: abs(x[1]),
    )
    return [FeatureContribution(feature=name, contribution=value) for name, value in top_features]
