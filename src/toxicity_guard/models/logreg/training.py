from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import FeatureUnion, Pipeline

from toxicity_guard.config import AppConfig, ClassifierConfig, VectorizerConfig
from toxicity_guard.data import (
    LABEL_COLUMN,
    SENTIMENT_SCHEMA,
    TEXT_COLUMN,
    load_dataset,
    split_dataset,
)
from toxicity_guard.evaluation import BinaryClassificationMetrics, evaluate_binary
from toxicity_guard.models.artifacts import save_metrics, save_model, save_predictions
from toxicity_guard.utils.logging import get_logger, json_log

log = get_logger(__name__)

FEATURES_STEP = 'features'
CLASSIFIER_STEP = 'logreg'


@dataclass(frozen=True)
class TrainingResult:
    """Outcome of a single training run."""

    trainer_name: str
    metrics: BinaryClassificationMetrics
    model_path: Path
    pipeline: Pipeline
    train_rows: int
    test_rows: int


def build_vectorizer(vectorizer_cfg: VectorizerConfig) -> TfidfVectorizer | FeatureUnion:
    """
    Build the text featurizer from config.

    Supports two modes:
    - Single TfidfVectorizer (exactly one strategy)
    - FeatureUnion of one TfidfVectorizer per strategy (e.g. word n-grams + char tri-grams)

    Args:
        vectorizer_cfg: Vectorizer configuration

    Returns:
        TfidfVectorizer or FeatureUnion depending on config
    """
    if not vectorizer_cfg.strategies:
        raise ValueError('vectorizer.strategies must define at least one strategy')

    common_params = {
        'lowercase': vectorizer_cfg.lowercase,
        'strip_accents': vectorizer_cfg.strip_accents,
        'max_df': vectorizer_cfg.max_df,
        'sublinear_tf': vectorizer_cfg.sublinear_tf,
    }

    transformers = []
    for name, strategy in vectorizer_cfg.strategies.items():
        vec = TfidfVectorizer(
            analyzer=strategy.analyzer,
            ngram_range=tuple(strategy.ngram_range),
            min_df=strategy.min_df,
            **common_params,
        )
        transformers.append((name, vec))
        log.info(
            json_log(
                'vectorizer.strategy',
                component='training',
                strategy=name,
                analyzer=strategy.analyzer,
                ngram_range=list(strategy.ngram_range),
                min_df=strategy.min_df,
            )
        )

    if len(transformers) == 1:
        log.info(json_log('vectorizer.mode', component='training', mode='single'))
        return transformers[0][1]

    log.info(
        json_log(
            'vectorizer.mode',
            component='training',
            mode='feature_union',
            n_strategies=len(transformers),
        )
    )
    return FeatureUnion(transformers)


def build_classifier(classifier_cfg: ClassifierConfig, seed: int) -> LogisticRegression:
    return LogisticRegression(
        C=classifier_cfg.C,
        max_iter=classifier_cfg.max_iter,
        solver=classifier_cfg.solver,
        random_state=seed,
    )


def build_pipeline(config: AppConfig) -> Pipeline:
    """Features + logistic regression, unfitted."""
    return Pipeline(
        [
            (FEATURES_STEP, build_vectorizer(config.vectorizer)),
            (CLASSIFIER_STEP, build_classifier(config.classifier, config.split.seed)),
        ]
    )


def trainer_name(pipeline: Pipeline) -> str:
    """Name reported for the classifier step, e.g. ``LogisticRegression``."""
    return type(pipeline.named_steps[CLASSIFIER_STEP]).__name__


def score_frame(pipeline: Pipeline, df: pd.DataFrame) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return (predicted labels, raw scores, toxic probabilities) for each row."""
    texts = df[TEXT_COLUMN].astype(str)
    classes = list(pipeline.classes_)
    scores = pipeline.decision_function(texts)
    p_toxic = pipeline.predict_proba(texts)[:, classes.index(True)]
    y_pred = scores > 0
    return y_pred, scores, p_toxic


def train_model(config: AppConfig) -> TrainingResult:
    """
    Run the full training branch: load, split, fit, evaluate, persist.

    The archive is written last, after evaluation and the sidecar files, so a
    failed run leaves no model file behind.
    """
    data_path = config.paths.data
    model_path = config.paths.model

    df = load_dataset(data_path)
    split = split_dataset(
        df,
        test_fraction=config.split.test_fraction,
        seed=config.split.seed,
    )
    if split.train[LABEL_COLUMN].nunique() < 2:
        raise ValueError('Training subset must contain both toxic and non-toxic rows')

    model = build_pipeline(config)
    name = trainer_name(model)

    log.info(
        json_log(
            'train.start',
            component='training',
            data=str(data_path),
            trainer=name,
            train_rows=int(len(split.train)),
        )
    )
    model.fit(split.train[TEXT_COLUMN].astype(str), split.train[LABEL_COLUMN].astype(bool))
    log.info(json_log('train.completed', component='training', trainer=name))

    y_pred, scores, p_toxic = score_frame(model, split.test)
    y_test = split.test[LABEL_COLUMN].to_numpy()
    metrics = evaluate_binary(y_test, scores, p_toxic, y_pred)

    save_metrics(metrics, name, model_path)
    save_predictions(
        texts=split.test[TEXT_COLUMN].tolist(),
        y_true=[bool(v) for v in y_test],
        y_pred=[bool(v) for v in y_pred],
        scores=[float(v) for v in scores],
        probabilities=[float(v) for v in p_toxic],
        model_path=model_path,
    )
    save_model(
        model,
        SENTIMENT_SCHEMA,
        model_path,
        metadata={
            'trainer': name,
            'seed': config.split.seed,
            'test_fraction': config.split.test_fraction,
            'train_rows': int(len(split.train)),
            'test_rows': int(len(split.test)),
            'data_path': str(data_path),
        },
    )

    return TrainingResult(
        trainer_name=name,
        metrics=metrics,
        model_path=Path(model_path),
        pipeline=model,
        train_rows=int(len(split.train)),
        test_rows=int(len(split.test)),
    )
