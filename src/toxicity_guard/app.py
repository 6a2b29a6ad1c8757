"""Train-or-infer orchestration behind the console entry point."""

from __future__ import annotations

from collections.abc import Callable

from .config import MODE_INFER, MODE_TRAIN, AppConfig
from .models.logreg import TrainingResult, train_model
from .reporting import (
    print_binary_classification_metrics,
    print_model_saved,
    print_single_prediction,
)
from .serving import PredictionEngine, SentimentIssue, SentimentPrediction, load_model
from .utils import get_logger, json_log

log = get_logger(__name__)


def run_training(config: AppConfig) -> TrainingResult:
    """Train, report metrics and the archive path."""
    result = train_model(config)
    print_binary_classification_metrics(result.trainer_name, result.metrics)
    print_model_saved(result.model_path)
    return result


def run_inference(
    config: AppConfig,
    text: str | None = None,
    wait: Callable[[], object] | None = None,
) -> SentimentPrediction:
    """
    Load the saved model and score one sample.

    Args:
        config: Application config; ``inference.sample_text`` is used when
            ``text`` is not given.
        text: Optional text overriding the configured sample.
        wait: Called after printing, e.g. to block until the user hits a key.
    """
    artifact = load_model(config.paths.model)
    engine = PredictionEngine(artifact)

    sample = SentimentIssue(text=text if text is not None else config.inference.sample_text)
    prediction = engine.predict(sample)
    print_single_prediction(sample, prediction)

    if wait is not None:
        wait()
    return prediction


def dispatch(
    config: AppConfig,
    wait: Callable[[], object] | None = None,
) -> TrainingResult | SentimentPrediction | None:
    """
    Route to exactly one branch for ``config.mode``.

    An unrecognized mode runs nothing and prints nothing; it only leaves a
    warning in the log and returns None.
    """
    log.info(json_log('mode.dispatch', component='app', mode=config.mode))
    if config.mode == MODE_TRAIN:
        return run_training(config)
    if config.mode == MODE_INFER:
        return run_inference(config, wait=wait)

    log.warning(
        json_log(
            'mode.unrecognized',
            component='app',
            mode=config.mode,
            known=[MODE_TRAIN, MODE_INFER],
        )
    )
    return None
