"""Worked usage scenarios for the apply helpers.

Each scenario builds a value twice: once with the helpers inside a single
expression and once the long way with a temporary and separate statements.
The two results must compare equal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Callable, List, Union

from .chain import Applicable
from .config import DemoConfig
from .functional import apply, apply_with_param, apply_with_params
from .utils.logging import CallLogger

logger = logging.getLogger(__name__)


@dataclass
class Dog:
    name: str = "Pochi"
    size: str = "Middle"


class PathBuf:
    """Mutable filesystem path that grows in place with :meth:`push`."""

    def __init__(self, path: Union[str, PurePosixPath] = ".") -> None:
        self._path = PurePosixPath(path)

    def push(self, segment: Union[str, PurePosixPath]) -> None:
        # an absolute segment replaces the whole path
        self._path = self._path / segment

    @property
    def path(self) -> PurePosixPath:
        return self._path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathBuf):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"PathBuf({str(self._path)!r})"


@dataclass
class ScenarioResult:
    name: str
    result: object
    expected: object
    calls: int

    @property
    def ok(self) -> bool:
        return self.result == self.expected


def _set_size(size: str) -> Callable[[Dog], None]:
    def _inner(dog: Dog) -> None:
        dog.size = size

    return _inner


def run_scenarios(cfg: DemoConfig, tracker: CallLogger) -> List[ScenarioResult]:
    """Run every scenario, counting calls to the supplied functions in ``tracker``."""

    results: List[ScenarioResult] = []

    def record(name: str, result: object, expected: object) -> None:
        scenario = ScenarioResult(name, result, expected, tracker.count(name))
        logger.info("%s: %s (%d calls)", name, "ok" if scenario.ok else "MISMATCH", scenario.calls)
        results.append(scenario)

    expected_dog = Dog()
    expected_dog.size = cfg.size
    name = "apply: set record field"
    record(name, apply(Dog(), tracker.track(_set_size(cfg.size), name)), expected_dog)

    joined = "/".join(cfg.segments)
    expected_path = PathBuf(cfg.base_path)
    expected_path.push(joined)
    name = "apply_with_param: push joined path"
    record(name, apply_with_param(PathBuf(cfg.base_path), tracker.track(PathBuf.push, name), joined), expected_path)

    expected_path = PathBuf(cfg.base_path)
    for segment in cfg.segments:
        expected_path.push(segment)
    name = "apply_with_params: push each segment"
    record(
        name,
        apply_with_params(PathBuf(cfg.base_path), tracker.track(PathBuf.push, name), cfg.segments),
        expected_path,
    )

    name = "Applicable: chained pushes"
    push = tracker.track(PathBuf.push, name)
    chained = Applicable(PathBuf(cfg.base_path))
    for segment in cfg.segments:
        chained = chained.apply(lambda it, segment=segment: push(it, segment))
    record(name, chained.unwrap(), expected_path)

    name = "apply_with_params: no parameters"
    record(name, apply_with_params(PathBuf(cfg.base_path), tracker.track(PathBuf.push, name), []), PathBuf(cfg.base_path))

    return results


__all__ = ["Dog", "PathBuf", "ScenarioResult", "run_scenarios"]
