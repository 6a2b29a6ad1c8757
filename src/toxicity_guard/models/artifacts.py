"""
Persistence of fitted pipelines.

A model archive is a single joblib file holding the fitted scikit-learn
pipeline together with the dataset schema it was trained on and a small
metadata dict. Metrics and test predictions are written as sidecar files
next to the archive.
"""

from __future__ import annotations

import json
import os
import platform
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import joblib
import pandas as pd
from sklearn.pipeline import Pipeline

from ..data import DatasetSchema
from ..evaluation import BinaryClassificationMetrics
from ..utils import get_logger, json_log

log = get_logger(__name__)

ARCHIVE_FORMAT_VERSION = 1


def get_environment_info() -> dict[str, str]:
    """Get Python and sklearn versions."""
    import sklearn

    return {
        'python_version': platform.python_version(),
        'sklearn_version': sklearn.__version__,
    }


def sidecar_path(model_path: str | Path, suffix: str) -> Path:
    """Return ``<model_path>.<suffix>`` next to the archive."""
    path = Path(model_path)
    return path.with_name(f'{path.name}.{suffix}')


def save_model(
    pipeline: Pipeline,
    schema: DatasetSchema,
    model_path: str | Path,
    metadata: dict[str, Any] | None = None,
) -> Path:
    """
    Serialize a fitted pipeline and its input schema to a single archive.

    The archive is dumped to a temporary file and then moved over
    ``model_path``, so an existing archive is replaced only by a complete one.

    Args:
        pipeline: Fitted features + classifier pipeline
        schema: Schema of the rows the pipeline was trained on
        model_path: Destination file
        metadata: Extra fields stored alongside (trainer name, seed, ...)

    Returns:
        Path to the written archive
    """
    path = Path(model_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    bundle = {
        'format_version': ARCHIVE_FORMAT_VERSION,
        'pipeline': pipeline,
        'schema': schema.to_dict(),
        'metadata': {
            'created_at': datetime.now(UTC).isoformat(),
            **get_environment_info(),
            **(metadata or {}),
        },
    }
    tmp_path = path.with_name(f'{path.name}.tmp')
    try:
        joblib.dump(bundle, tmp_path, compress=3)
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)

    log.info(
        json_log(
            'model.saved',
            component='models.artifacts',
            path=str(path),
            schema=schema.to_dict(),
        )
    )
    return path


def save_metrics(
    metrics: BinaryClassificationMetrics,
    trainer_name: str,
    model_path: str | Path,
) -> Path:
    """Write test metrics as JSON next to the archive."""
    output_path = sidecar_path(model_path, 'metrics.json')
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {'trainer': trainer_name, 'metrics': metrics.to_dict()}
    output_path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    return output_path


def save_predictions(
    texts: list[str],
    y_true: list[bool],
    y_pred: list[bool],
    scores: list[float],
    probabilities: list[float],
    model_path: str | Path,
) -> Path:
    """
    Save per-row test predictions as CSV next to the archive.

    Format: text, label, prediction, score, probability
    """
    output_path = sidecar_path(model_path, 'predictions.csv')
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(
        {
            'text': texts,
            'label': y_true,
            'prediction': y_pred,
            'score': scores,
            'probability': probabilities,
        }
    )
    df.to_csv(output_path, index=False)
    return output_path
