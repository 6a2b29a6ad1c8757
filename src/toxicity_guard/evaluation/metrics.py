"""
Binary classification metrics for a held-out test subset.

Toxic (``True``) is the positive class throughout. Metrics that are
undefined for a single-class test subset (ROC AUC, PR AUC) are reported
as NaN rather than raising.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    average_precision_score,
    confusion_matrix,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
    roc_auc_score,
)

from ..utils import get_logger, json_log

log = get_logger(__name__)

_EPS = 1e-15


@dataclass
class BinaryClassificationMetrics:
    """Summary statistics computed once per training run."""

    accuracy: float
    area_under_roc_curve: float
    area_under_precision_recall_curve: float
    f1_score: float
    log_loss: float
    log_loss_reduction: float
    positive_precision: float
    positive_recall: float
    negative_precision: float
    negative_recall: float

    # Diagnostics
    confusion_matrix: list[list[int]] = field(default_factory=list)
    support_pos: int = 0
    support_neg: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def compute_prior_log_loss(y_true: np.ndarray) -> float:
    """Log-loss of a constant predictor that always outputs the positive rate."""
    p = float(np.clip(np.mean(y_true), _EPS, 1 - _EPS))
    return float(-(p * np.log(p) + (1 - p) * np.log(1 - p)))


def compute_log_loss_reduction(log_loss_value: float, prior_log_loss: float) -> float:
    """
    Relative improvement of the model's log-loss over the prior.

    1 is perfect, 0 is no better than the prior, negative is worse.
    """
    if prior_log_loss <= 0:
        return 0.0
    return float((prior_log_loss - log_loss_value) / prior_log_loss)


def evaluate_binary(
    y_true: np.ndarray,
    scores: np.ndarray,
    probabilities: np.ndarray,
    y_pred: np.ndarray,
) -> BinaryClassificationMetrics:
    """
    Compute binary classification metrics.

    Args:
        y_true: True labels (bool or 0/1; True/1 = toxic)
        scores: Raw decision scores (margins)
        probabilities: Calibrated probability of the positive class
        y_pred: Predicted labels

    Returns:
        BinaryClassificationMetrics for the subset
    """
    y_true = np.asarray(y_true).astype(int)
    y_pred = np.asarray(y_pred).astype(int)
    scores = np.asarray(scores, dtype=float)
    probabilities = np.asarray(probabilities, dtype=float)

    if len(y_true) == 0:
        raise ValueError('Cannot evaluate on an empty test subset')

    single_class = len(np.unique(y_true)) < 2
    if single_class:
        auc = float('nan')
        pr_auc = float('nan')
    else:
        auc = float(roc_auc_score(y_true, scores))
        pr_auc = float(average_precision_score(y_true, probabilities))

    ll = float(log_loss(y_true, probabilities, labels=[0, 1]))
    prior_ll = compute_prior_log_loss(y_true)

    cm = confusion_matrix(y_true, y_pred, labels=[1, 0])
    support_pos = int(np.sum(y_true == 1))

    metrics = BinaryClassificationMetrics(
        accuracy=float(accuracy_score(y_true, y_pred)),
        area_under_roc_curve=auc,
        area_under_precision_recall_curve=pr_auc,
        f1_score=float(f1_score(y_true, y_pred, pos_label=1, zero_division=0.0)),
        log_loss=ll,
        log_loss_reduction=compute_log_loss_reduction(ll, prior_ll),
        positive_precision=float(precision_score(y_true, y_pred, pos_label=1, zero_division=0.0)),
        positive_recall=float(recall_score(y_true, y_pred, pos_label=1, zero_division=0.0)),
        negative_precision=float(precision_score(y_true, y_pred, pos_label=0, zero_division=0.0)),
        negative_recall=float(recall_score(y_true, y_pred, pos_label=0, zero_division=0.0)),
        confusion_matrix=cm.tolist(),
        support_pos=support_pos,
        support_neg=int(len(y_true) - support_pos),
    )

    log.info(
        json_log(
            'evaluate.completed',
            component='evaluation',
            rows=int(len(y_true)),
            accuracy=metrics.accuracy,
            auc=metrics.area_under_roc_curve,
            f1=metrics.f1_score,
        )
    )
    return metrics
