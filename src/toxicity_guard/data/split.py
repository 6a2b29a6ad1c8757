"""Dataset splitting utilities."""

from __future__ import annotations

from typing import NamedTuple

import pandas as pd
from sklearn.model_selection import train_test_split

from ..utils import get_logger, json_log

log = get_logger(__name__)


class TrainTestData(NamedTuple):
    train: pd.DataFrame
    test: pd.DataFrame


def split_dataset(
    df: pd.DataFrame,
    test_fraction: float = 0.2,
    seed: int = 1,
    stratify_column: str | None = None,
) -> TrainTestData:
    """Partition a dataset into train/test subsets, reproducibly for a given seed."""
    if not 0.0 < test_fraction < 1.0:
        raise ValueError(f'test_fraction must be in (0, 1), got {test_fraction}')
    if stratify_column is not None and stratify_column not in df.columns:
        raise ValueError(f"Column '{stratify_column}' not found for stratified split")

    train_df, test_df = train_test_split(
        df,
        test_size=test_fraction,
        random_state=seed,
        shuffle=True,
        stratify=df[stratify_column] if stratify_column else None,
    )

    log.info(
        json_log(
            'split.completed',
            component='data.split',
            rows=int(len(df)),
            train_rows=int(len(train_df)),
            test_rows=int(len(test_df)),
            test_fraction=test_fraction,
            seed=seed,
        )
    )
    return TrainTestData(train=train_df, test=test_df)
