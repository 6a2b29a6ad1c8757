"""Human-readable console output for metrics and predictions."""

from __future__ import annotations

from pathlib import Path

import typer

from ..evaluation import BinaryClassificationMetrics
from ..serving.schemas import FeatureContribution, SentimentIssue, SentimentPrediction

_BORDER = '*' * 60
_RULE = '*' + '-' * 59
END_OF_PROCESS = '================End of Process.Hit any key to exit' + '=' * 34


def format_binary_classification_metrics(
    trainer_name: str,
    metrics: BinaryClassificationMetrics,
) -> str:
    lines = [
        _BORDER,
        f'*       Metrics for {trainer_name} binary classification model',
        _RULE,
        f'*       Accuracy: {metrics.accuracy:.2%}',
        f'*       Area Under Curve:      {metrics.area_under_roc_curve:.2%}',
        f'*       Area under Precision recall Curve:  '
        f'{metrics.area_under_precision_recall_curve:.2%}',
        f'*       F1Score:  {metrics.f1_score:.2%}',
        f'*       LogLoss:  {metrics.log_loss:.2f}',
        f'*       LogLossReduction:  {metrics.log_loss_reduction:.2f}',
        f'*       PositivePrecision:  {metrics.positive_precision:.2f}',
        f'*       PositiveRecall:  {metrics.positive_recall:.2f}',
        f'*       NegativePrecision:  {metrics.negative_precision:.2f}',
        f'*       NegativeRecall:  {metrics.negative_recall:.2%}',
        _BORDER,
    ]
    return '\n'.join(lines)


def format_single_prediction(issue: SentimentIssue, prediction: SentimentPrediction) -> str:
    label = 'Toxic' if prediction.prediction else 'Non Toxic'
    lines = [
        '=============== Single Prediction  ===============',
        f'Text: {issue.text} ',
        f'Prediction: {label} sentiment | '
        f'Probability of being toxic: {prediction.probability} ',
        f'Score: {prediction.score} ',
        END_OF_PROCESS,
    ]
    return '\n'.join(lines)


def print_binary_classification_metrics(
    trainer_name: str,
    metrics: BinaryClassificationMetrics,
) -> None:
    typer.echo(format_binary_classification_metrics(trainer_name, metrics))


def print_single_prediction(issue: SentimentIssue, prediction: SentimentPrediction) -> None:
    typer.echo(format_single_prediction(issue, prediction))


def print_explanation(contributions: list[FeatureContribution]) -> None:
    typer.echo('Top features:')
    for item in contributions:
        typer.echo(f'  {item.contribution:+.4f}  {item.feature}')


def print_model_saved(model_path: str | Path) -> None:
    typer.echo(f'The model is saved to {model_path}')
