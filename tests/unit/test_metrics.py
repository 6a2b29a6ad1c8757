"""Unit tests for binary classification metrics."""

from __future__ import annotations

import math

import numpy as np
from sklearn.metrics import f1_score, log_loss, roc_auc_score

from toxicity_guard.evaluation import (
    BinaryClassificationMetrics,
    compute_log_loss_reduction,
    compute_prior_log_loss,
    evaluate_binary,
)


class TestEvaluateBinary:
    """Tests for evaluate_binary."""

    def test_returns_metrics_dataclass(self) -> None:
        y_true = np.array([True, True, False, False])
        scores = np.array([2.0, 1.0, -1.0, -2.0])
        probas = np.array([0.9, 0.7, 0.3, 0.1])

        result = evaluate_binary(y_true, scores, probas, scores > 0)

        assert isinstance(result, BinaryClassificationMetrics)
        assert result.accuracy == 1.0
        assert result.area_under_roc_curve == 1.0
        assert result.positive_precision == 1.0
        assert result.negative_recall == 1.0

    def test_values_match_sklearn(self) -> None:
        y_true = np.array([1, 1, 1, 0, 0, 0, 0, 1])
        scores = np.array([1.5, -0.2, 0.8, -1.0, 0.3, -2.0, -0.5, 2.5])
        probas = 1 / (1 + np.exp(-scores))
        y_pred = scores > 0

        result = evaluate_binary(y_true, scores, probas, y_pred)

        assert abs(result.f1_score - f1_score(y_true, y_pred.astype(int))) < 1e-9
        assert abs(result.area_under_roc_curve - roc_auc_score(y_true, scores)) < 1e-9
        assert abs(result.log_loss - log_loss(y_true, probas)) < 1e-9

    def test_confusion_matrix_positive_first(self) -> None:
        y_true = np.array([1, 1, 0, 0])
        y_pred = np.array([1, 0, 0, 0])
        scores = np.array([1.0, -1.0, -1.0, -1.0])
        probas = np.array([0.7, 0.3, 0.3, 0.3])

        result = evaluate_binary(y_true, scores, probas, y_pred)

        assert result.confusion_matrix == [[1, 1], [0, 2]]
        assert result.support_pos == 2
        assert result.support_neg == 2

    def test_single_class_subset_reports_nan_auc(self) -> None:
        y_true = np.array([0, 0, 0])
        scores = np.array([-1.0, -2.0, -0.5])
        probas = np.array([0.2, 0.1, 0.4])

        result = evaluate_binary(y_true, scores, probas, scores > 0)

        assert math.isnan(result.area_under_roc_curve)
        assert math.isnan(result.area_under_precision_recall_curve)
        assert result.accuracy == 1.0

    def test_to_dict_contains_all_fields(self) -> None:
        y_true = np.array([1, 0])
        scores = np.array([1.0, -1.0])
        probas = np.array([0.8, 0.2])

        data = evaluate_binary(y_true, scores, probas, scores > 0).to_dict()

        assert {'accuracy', 'f1_score', 'log_loss_reduction', 'confusion_matrix'} <= set(data)


class TestLogLossReduction:
    """Tests for prior log-loss and its reduction."""

    def test_prior_of_balanced_labels_is_ln2(self) -> None:
        assert abs(compute_prior_log_loss(np.array([0, 1, 0, 1])) - math.log(2)) < 1e-9

    def test_reduction_of_prior_is_zero(self) -> None:
        assert compute_log_loss_reduction(0.5, 0.5) == 0.0

    def test_reduction_of_perfect_model_is_one(self) -> None:
        assert compute_log_loss_reduction(0.0, 0.69) == 1.0

    def test_reduction_with_zero_prior(self) -> None:
        assert compute_log_loss_reduction(0.1, 0.0) == 0.0
