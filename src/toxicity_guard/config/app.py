"""Config models and loaders for the train/infer application."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

MODE_TRAIN = 'train'
MODE_INFER = 'using'

DEFAULT_DATA_PATH = Path('Data/wikiDetoxAnnotated40kRows.tsv')
DEFAULT_MODEL_PATH = Path('MLModels/SentimentModel.joblib')
DEFAULT_SAMPLE_TEXT = 'This is a very rude movie'


@dataclass(frozen=True)
class PathConfig:
    data: Path = DEFAULT_DATA_PATH
    model: Path = DEFAULT_MODEL_PATH


@dataclass(frozen=True)
class SplitConfig:
    test_fraction: float = 0.2
    seed: int = 1


@dataclass(frozen=True)
class VectorizerStrategy:
    analyzer: str = 'word'
    ngram_range: tuple[int, int] = (1, 1)
    min_df: int = 1


def _default_strategies() -> dict[str, VectorizerStrategy]:
    return {
        'word': VectorizerStrategy(analyzer='word', ngram_range=(1, 2)),
        'char': VectorizerStrategy(analyzer='char_wb', ngram_range=(3, 3)),
    }


@dataclass(frozen=True)
class VectorizerConfig:
    lowercase: bool = True
    strip_accents: str | None = 'unicode'
    sublinear_tf: bool = True
    max_df: float = 1.0
    strategies: dict[str, VectorizerStrategy] = field(default_factory=_default_strategies)


@dataclass(frozen=True)
class ClassifierConfig:
    C: float = 1.0
    max_iter: int = 1000
    solver: str = 'liblinear'


@dataclass(frozen=True)
class InferenceConfig:
    sample_text: str = DEFAULT_SAMPLE_TEXT
    wait_for_key: bool = True


@dataclass(frozen=True)
class AppConfig:
    mode: str = MODE_INFER
    paths: PathConfig = field(default_factory=PathConfig)
    split: SplitConfig = field(default_factory=SplitConfig)
    vectorizer: VectorizerConfig = field(default_factory=VectorizerConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    inference: InferenceConfig = field(default_factory=InferenceConfig)

    @classmethod
    def default(cls, base_dir: str | Path | None = None) -> AppConfig:
        """Return the built-in configuration with paths rooted at base_dir."""
        base = Path(base_dir) if base_dir is not None else Path.cwd()
        return cls(
            paths=PathConfig(
                data=_resolve_path(base, DEFAULT_DATA_PATH),
                model=_resolve_path(base, DEFAULT_MODEL_PATH),
            ),
        )


def load_app_config(config_path: str | Path) -> AppConfig:
    """Load an application config YAML file."""
    cfg_path = Path(config_path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f'Config file not found: {cfg_path}')

    with cfg_path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh) or {}

    base_dir = cfg_path.parent

    paths_section = data.get('paths') or {}
    split_section = data.get('split') or {}
    vectorizer_section = data.get('vectorizer') or {}
    classifier_section = data.get('classifier') or {}
    inference_section = data.get('inference') or {}

    paths = PathConfig(
        data=_resolve_path(base_dir, paths_section.get('data', DEFAULT_DATA_PATH)),
        model=_resolve_path(base_dir, paths_section.get('model', DEFAULT_MODEL_PATH)),
    )

    test_fraction = float(split_section.get('test_fraction', 0.2))
    if not 0.0 < test_fraction < 1.0:
        raise ValueError(f'split.test_fraction must be in (0, 1), got {test_fraction}')
    split = SplitConfig(
        test_fraction=test_fraction,
        seed=int(split_section.get('seed', 1)),
    )

    strategies_section = vectorizer_section.get('strategies')
    strategies = (
        _parse_strategies(strategies_section)
        if strategies_section
        else _default_strategies()
    )
    vectorizer = VectorizerConfig(
        lowercase=bool(vectorizer_section.get('lowercase', True)),
        strip_accents=vectorizer_section.get('strip_accents', 'unicode'),
        sublinear_tf=bool(vectorizer_section.get('sublinear_tf', True)),
        max_df=float(vectorizer_section.get('max_df', 1.0)),
        strategies=strategies,
    )

    classifier = ClassifierConfig(
        C=float(classifier_section.get('C', 1.0)),
        max_iter=int(classifier_section.get('max_iter', 1000)),
        solver=classifier_section.get('solver', 'liblinear'),
    )

    inference = InferenceConfig(
        sample_text=str(inference_section.get('sample_text', DEFAULT_SAMPLE_TEXT)),
        wait_for_key=bool(inference_section.get('wait_for_key', True)),
    )

    return AppConfig(
        mode=str(data.get('mode', MODE_INFER)),
        paths=paths,
        split=split,
        vectorizer=vectorizer,
        classifier=classifier,
        inference=inference,
    )


def _parse_strategies(section: dict[str, Any]) -> dict[str, VectorizerStrategy]:
    strategies: dict[str, VectorizerStrategy] = {}
    for name, strategy in section.items():
        strategy = strategy or {}
        ngram_range = strategy.get('ngram_range', [1, 1])
        if len(ngram_range) != 2:
            raise ValueError(f"vectorizer.strategies.{name}.ngram_range must have two values")
        strategies[name] = VectorizerStrategy(
            analyzer=strategy.get('analyzer', 'word'),
            ngram_range=(int(ngram_range[0]), int(ngram_range[1])),
            min_df=int(strategy.get('min_df', 1)),
        )
    return strategies


def _resolve_path(base: Path, value: str | Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = (base / path).resolve()
    return path
