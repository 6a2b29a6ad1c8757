"""Model loading utilities for the inference branch."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import joblib
from sklearn.pipeline import Pipeline

from ..data import SENTIMENT_SCHEMA, DatasetSchema
from ..utils import get_logger, json_log

log = get_logger(__name__)


@dataclass(frozen=True)
class ModelArtifact:
    """Container for a loaded pipeline, its input schema and metadata."""

    model: Pipeline
    schema: DatasetSchema
    metadata: dict[str, Any]
    path: Path

    @property
    def trainer_name(self) -> str:
        return str(self.metadata.get('trainer', 'unknown'))


class ModelLoadError(RuntimeError):
    """Raised when model loading fails."""


def load_model(
    model_path: str | Path,
    expected_schema: DatasetSchema = SENTIMENT_SCHEMA,
) -> ModelArtifact:
    """
    Load a persisted archive and check it against the expected schema.

    Args:
        model_path: Path to the joblib archive.
        expected_schema: Schema the caller will feed rows in.

    Returns:
        ModelArtifact containing the pipeline and its schema.

    Raises:
        ModelLoadError: If the archive is missing, corrupted or was saved
            with a different schema.
    """
    path = Path(model_path)
    if not path.exists():
        raise ModelLoadError(f'Model file not found: {path}')

    try:
        bundle = joblib.load(path)
    except Exception as exc:
        raise ModelLoadError(f'Failed to load model: {exc}') from exc

    if not isinstance(bundle, dict) or 'pipeline' not in bundle or 'schema' not in bundle:
        raise ModelLoadError(f'Not a model archive: {path}')

    schema = DatasetSchema.from_dict(bundle['schema'])
    if schema != expected_schema:
        raise ModelLoadError(
            f'Schema mismatch: archive has {schema.to_dict()}, '
            f'expected {expected_schema.to_dict()}'
        )

    metadata = bundle.get('metadata') or {}

    log.info(
        json_log(
            'model.loaded',
            component='serving.loader',
            path=str(path),
            trainer=metadata.get('trainer'),
            created_at=metadata.get('created_at'),
        )
    )

    return ModelArtifact(
        model=bundle['pipeline'],
        schema=schema,
        metadata=metadata,
        path=path,
    )
