from __future__ import annotations

import json
import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from textinterp.core.models import choice_resolver
from textinterp.core.report import InterpolationReport
from textinterp.errors import ConfigurationError, InterpolationError
from textinterp.logging.helpers import get_logger, setup_base_logger
from textinterp.parsing.parser import _build_parser
from textinterp.runtime.config import InterpolatorConfig
from textinterp.runtime.wiring import build_interpolator

EXIT_OK = 0
EXIT_INTERPOLATION_ERROR = 1
EXIT_USAGE = 2
EXIT_UNRESOLVED = 3

logger = get_logger('cli')


class CliError(Exception):
    """Usage-level failure reported with EXIT_USAGE."""


def _configure_logging(enable_json: bool, verbose: bool) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    setup_base_logger(json_logs=enable_json, level=level)
    return get_logger('cli')


def _load_mapping(path: str) -> Dict[str, Any]:
    """Load MAP.json and validate its shape (name → str | list[str])."""
    try:
        raw = Path(path).read_text(encoding='utf-8')
    except OSError as exc:
        raise CliError(f'cannot read mapping file {path!r}: {exc}') from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CliError(f'mapping file {path!r} is not valid JSON: {exc}') from exc
    if not isinstance(data, dict):
        raise CliError(f'mapping file {path!r} must contain a JSON object')

    for name, value in data.items():
        if isinstance(value, str):
            continue
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            continue
        raise CliError(f'mapping entry {name!r} must be a string or a list of strings')
    return data


def _read_text(text: List[str], input_file: Optional[str]) -> str:
    if text:
        return ' '.join(text)
    if input_file and input_file != '-':
        try:
            return Path(input_file).read_text(encoding='utf-8')
        except OSError as exc:
            raise CliError(f'cannot read input file {input_file!r}: {exc}') from exc
    return sys.stdin.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point; returns the process exit status."""
    ns = _build_parser().parse_args(argv)
    log = _configure_logging(ns.json_logs, ns.verbose)

    try:
        config = InterpolatorConfig.from_env().with_overrides(
            marker=ns.marker,
            policy=ns.guard,
            recursion_limit=ns.limit,
            classifier_ref=ns.classifier_ref,
        )
        mapping = _load_mapping(ns.map_file)
        text = _read_text(ns.text, ns.input_file)
        engine = build_interpolator(config, logger=get_logger('engine'))
    except (CliError, ConfigurationError) as exc:
        log.error('%s', exc)
        return EXIT_USAGE

    resolver = choice_resolver(mapping, random.Random(ns.seed))
    report = InterpolationReport()

    try:
        output = engine.interp(text, resolver, report=report)
    except InterpolationError as exc:
        log.error('interpolation failed: %s', exc)
        output = None

    if ns.report:
        sys.stderr.write(report.to_json() + '\n')
    if output is None:
        return EXIT_INTERPOLATION_ERROR

    sys.stdout.write(output + '\n')
    if ns.check and engine.contains_template(output):
        log.warning('output still contains unresolved templates: %s', ', '.join(report.unresolved) or '?')
        return EXIT_UNRESOLVED
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == '__main__':
    run()
