"""Command-line interface for toxicity_guard."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from ..app import dispatch, run_training
from ..config import AppConfig, load_app_config
from ..reporting import print_explanation, print_single_prediction
from ..serving import PredictionEngine, SentimentIssue, explain_prediction, load_model
from ..utils import get_logger, json_log

app = typer.Typer(help='Toxicity Guard CLI', no_args_is_help=True)

log = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path('configs/app.yaml')

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        '--config',
        '-c',
        help='Path to app configuration YAML (default: configs/app.yaml when present).',
    ),
]
DataOption = Annotated[
    Path | None,
    typer.Option('--data', '-d', help='Optional override for the training TSV path.'),
]
ModelOption = Annotated[
    Path | None,
    typer.Option('--model', '-m', help='Optional override for the model archive path.'),
]


def _resolve_path(value: Path | None) -> Path | None:
    if value is None:
        return None
    return Path(value).expanduser().resolve()


def _load_config(config: Path | None) -> AppConfig:
    if config is not None:
        return load_app_config(config)
    if DEFAULT_CONFIG_PATH.exists():
        return load_app_config(DEFAULT_CONFIG_PATH)
    return AppConfig.default()


def _apply_overrides(
    config: AppConfig,
    mode: str | None = None,
    data: Path | None = None,
    model: Path | None = None,
) -> AppConfig:
    path_overrides: dict[str, Path] = {}
    if data is not None:
        path_overrides['data'] = _resolve_path(data)  # type: ignore[assignment]
    if model is not None:
        path_overrides['model'] = _resolve_path(model)  # type: ignore[assignment]
    if path_overrides:
        config = replace(config, paths=replace(config.paths, **path_overrides))
    if mode is not None:
        config = replace(config, mode=mode)
    return config


def _wait_for_key() -> None:
    if not sys.stdin.isatty():
        return
    typer.prompt('', default='', show_default=False, prompt_suffix='')


@app.command('run')
def run(
    config: ConfigOption = None,
    mode: Annotated[
        str | None,
        typer.Option('--mode', help="Branch to run: 'train' or 'using' (default: from config)."),
    ] = None,
    wait: Annotated[
        bool | None,
        typer.Option(
            '--wait/--no-wait',
            help='Wait for Enter after a prediction (default: from config).',
        ),
    ] = None,
) -> None:
    """Run the branch selected by the configured mode."""
    cfg = _apply_overrides(_load_config(config), mode=mode)
    should_wait = cfg.inference.wait_for_key if wait is None else wait
    log.info(json_log('cli.run.start', component='cli', mode=cfg.mode, wait=should_wait))
    dispatch(cfg, wait=_wait_for_key if should_wait else None)


@app.command('train')
def train(
    config: ConfigOption = None,
    data: DataOption = None,
    model: ModelOption = None,
) -> None:
    """Train a toxicity model and save it."""
    cfg = _apply_overrides(_load_config(config), data=data, model=model)
    log.info(
        json_log(
            'cli.train.start',
            component='cli',
            data=str(cfg.paths.data),
            model=str(cfg.paths.model),
        )
    )
    run_training(cfg)


@app.command('predict')
def predict(
    text: Annotated[
        list[str] | None,
        typer.Option('--text', '-t', help='Text to score; repeat for several texts.'),
    ] = None,
    config: ConfigOption = None,
    model: ModelOption = None,
    explain: Annotated[
        bool,
        typer.Option('--explain', help='Also print the top contributing features.'),
    ] = False,
    top_k: Annotated[
        int,
        typer.Option('--top-k', help='Number of features shown with --explain.'),
    ] = 10,
) -> None:
    """Score one or more texts with a saved model."""
    cfg = _apply_overrides(_load_config(config), model=model)
    texts = text or [cfg.inference.sample_text]
    log.info(json_log('cli.predict.start', component='cli', model=str(cfg.paths.model)))

    artifact = load_model(cfg.paths.model)
    engine = PredictionEngine(artifact)
    for item in texts:
        issue = SentimentIssue(text=item)
        print_single_prediction(issue, engine.predict(issue))
        if explain:
            print_explanation(explain_prediction(issue, artifact, top_k=top_k))


if __name__ == '__main__':
    app()
