"""Behavioural tests for the apply helpers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pytest

from applicable import apply, apply_with_param, apply_with_params
from applicable.demo import PathBuf
from applicable.utils.logging import CallLogger


@dataclass
class Dog:
    name: str = "Pochi"
    size: str = "Middle"


def _set_big(dog: Dog) -> None:
    dog.size = "Big"


def test_apply_mutates_record_like_manual_assignment() -> None:
    exact_dog = Dog()
    exact_dog.size = "Big"

    dog = apply(Dog(), _set_big)

    assert dog == exact_dog
    assert dog.name == "Pochi"


def test_apply_returns_same_object() -> None:
    items = [1, 2]
    assert apply(items, lambda it: it.append(3)) is items
    assert items == [1, 2, 3]


def test_apply_with_inspecting_function_is_identity() -> None:
    seen = []
    value = {"a": 1}

    result = apply(value, seen.append)

    assert result is value
    assert result == {"a": 1}
    assert seen == [value]


def test_apply_ignores_function_return_value() -> None:
    assert apply([3, 1, 2], lambda it: sorted(it)) == [3, 1, 2]


def test_apply_twice_matches_sequential_manual_pushes() -> None:
    exact_path = PathBuf("/repo")
    exact_path.push("src")
    exact_path.push("lib.rs")

    path = apply(apply(PathBuf("/repo"), lambda it: it.push("src")), lambda it: it.push("lib.rs"))

    assert path == exact_path
    assert str(path.path) == "/repo/src/lib.rs"


def test_apply_calls_function_exactly_once() -> None:
    tracker = CallLogger()
    apply(Dog(), tracker.track(_set_big))
    assert tracker.calls == 1


def test_apply_propagates_exception_unchanged() -> None:
    error = ValueError("boom")

    def fail(_: object) -> None:
        raise error

    with pytest.raises(ValueError) as excinfo:
        apply([], fail)
    assert excinfo.value is error


def test_apply_with_param_accepts_unbound_method() -> None:
    exact_path = PathBuf("/repo")
    exact_path.push("src/lib.rs")

    path = apply_with_param(PathBuf("/repo"), PathBuf.push, "src/lib.rs")

    assert path == exact_path


def test_apply_with_param_on_numpy_array_is_in_place() -> None:
    arr = np.zeros(3)

    out = apply_with_param(arr, np.ndarray.fill, 2.5)

    assert out is arr
    np.testing.assert_allclose(out, [2.5, 2.5, 2.5])


def test_apply_with_params_pushes_each_segment_in_order() -> None:
    exact_path = PathBuf("/repo")
    exact_path.push("src")
    exact_path.push("lib.rs")

    path = apply_with_params(PathBuf("/repo"), PathBuf.push, ["src", "lib.rs"])

    assert path == exact_path


def test_apply_with_params_matches_fold() -> None:
    params = [3, 1, 4, 1, 5]
    expected = []
    for p in params:
        expected.append(p)

    assert apply_with_params([], list.append, params) == expected


def test_apply_with_params_threads_cumulative_state() -> None:
    snapshots = []

    def push_and_snapshot(acc: list, item: str) -> None:
        acc.append(item)
        snapshots.append(list(acc))

    apply_with_params([], push_and_snapshot, "abc")

    assert snapshots == [["a"], ["a", "b"], ["a", "b", "c"]]


def test_apply_with_params_empty_never_calls() -> None:
    tracker = CallLogger()
    value = PathBuf("/repo")

    result = apply_with_params(value, tracker.track(PathBuf.push), [])

    assert result is value
    assert result == PathBuf("/repo")
    assert tracker.calls == 0


def test_apply_with_params_consumes_generator_once() -> None:
    pulled = []

    def gen():
        for i in range(3):
            pulled.append(i)
            yield i

    assert apply_with_params([], list.append, gen()) == [0, 1, 2]
    assert pulled == [0, 1, 2]


def test_apply_with_params_stops_at_first_failure() -> None:
    target: list = []
    tracker = CallLogger()

    def append_unless_bad(acc: list, item: str) -> None:
        if item == "bad":
            raise RuntimeError(item)
        acc.append(item)

    tracked = tracker.track(append_unless_bad)
    with pytest.raises(RuntimeError, match="bad"):
        apply_with_params(target, tracked, ["first", "bad", "third"])

    assert target == ["first"]
    assert tracker.calls == 2


def test_apply_with_params_failure_does_not_pull_remaining_params() -> None:
    pulled = []

    def gen():
        for item in ("ok", "bad", "never"):
            pulled.append(item)
            yield item

    def strict(acc: list, item: str) -> None:
        if item == "bad":
            raise KeyError(item)
        acc.append(item)

    with pytest.raises(KeyError):
        apply_with_params([], strict, gen())
    assert pulled == ["ok", "bad"]
