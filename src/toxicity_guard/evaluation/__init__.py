"""Evaluation of fitted classifiers."""

from .metrics import (
    BinaryClassificationMetrics,
    compute_log_loss_reduction,
    compute_prior_log_loss,
    evaluate_binary,
)

__all__ = [
    'BinaryClassificationMetrics',
    'compute_log_loss_reduction',
    'compute_prior_log_loss',
    'evaluate_binary',
]
