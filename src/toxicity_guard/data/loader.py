"""Loading labeled TSV datasets into memory."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from ..utils import get_logger, json_log

log = get_logger(__name__)

LABEL_COLUMN = 'label'
TEXT_COLUMN = 'text'

_TRUE_VALUES = frozenset({'1', 'true', 't', 'yes', 'y'})
_FALSE_VALUES = frozenset({'0', 'false', 'f', 'no', 'n'})


class DatasetError(ValueError):
    """Raised when a dataset file cannot be parsed into labeled examples."""


@dataclass(frozen=True)
class DatasetSchema:
    """Column names and types bound to a labeled example."""

    columns: tuple[tuple[str, str], ...] = ((LABEL_COLUMN, 'bool'), (TEXT_COLUMN, 'str'))

    def to_dict(self) -> dict[str, str]:
        return dict(self.columns)

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> DatasetSchema:
        return cls(columns=tuple((str(k), str(v)) for k, v in data.items()))


SENTIMENT_SCHEMA = DatasetSchema()


def _parse_label(value: object) -> bool:
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    try:
        return float(text) != 0.0
    except ValueError as exc:
        raise DatasetError(f'Label value {value!r} is not a boolean') from exc


def load_dataset(path: str | Path) -> pd.DataFrame:
    """
    Read a tab-separated file of labeled text rows.

    The first column is bound to ``label`` and the second to ``text``,
    whatever the header calls them. Fields past the second are ignored.
    Quote characters are kept verbatim.

    Args:
        path: Location of the TSV file, with a header row.

    Returns:
        DataFrame with a boolean ``label`` and a string ``text`` column.

    Raises:
        FileNotFoundError: If the file does not exist.
        DatasetError: If the file is empty or a row cannot be bound to the schema.
    """
    data_path = Path(path)
    if not data_path.exists():
        raise FileNotFoundError(f'Dataset file not found: {data_path}')

    try:
        header = pd.read_csv(data_path, sep='\t', quoting=csv.QUOTE_NONE, nrows=0)
    except pd.errors.EmptyDataError as exc:
        raise DatasetError(f'Dataset file is empty: {data_path}') from exc
    if len(header.columns) < 2:
        raise DatasetError(
            f'Dataset must have at least 2 tab-separated columns, found {len(header.columns)}'
        )

    try:
        raw = pd.read_csv(
            data_path,
            sep='\t',
            header=0,
            usecols=[0, 1],
            quoting=csv.QUOTE_NONE,
            dtype=str,
            keep_default_na=False,
            na_values=[''],
            encoding='utf-8',
        )
    except pd.errors.EmptyDataError as exc:
        raise DatasetError(f'Dataset file is empty: {data_path}') from exc
    except pd.errors.ParserError as exc:
        raise DatasetError(f'Malformed dataset file {data_path}: {exc}') from exc

    labels = raw.iloc[:, 0]
    texts = raw.iloc[:, 1]

    null_text = texts.isna()
    if null_text.any():
        first = int(null_text.to_numpy().nonzero()[0][0])
        raise DatasetError(f'Row {first} has no text value')
    if labels.isna().any():
        first = int(labels.isna().to_numpy().nonzero()[0][0])
        raise DatasetError(f'Row {first} has no label value')

    df = pd.DataFrame(
        {
            LABEL_COLUMN: labels.map(_parse_label).astype(bool),
            TEXT_COLUMN: texts.astype(str),
        }
    )

    log.info(
        json_log(
            'dataset.loaded',
            component='data.loader',
            input=str(data_path),
            rows=int(len(df)),
            positives=int(df[LABEL_COLUMN].sum()),
            source_columns=[str(c) for c in raw.columns[:2]],
        )
    )
    return df
