"""Tests for the Result type.

Validates:
- Functor and monad laws
- Variant-by-variant combinator behavior
- Short-circuit guarantees (callbacks and alternatives never evaluated)
- Extraction errors
- Structure: transpose, flatten, clone, iteration
"""

from __future__ import annotations

from typing import Callable

import pytest

from fallible import (
    Err,
    ErrorCode,
    Failure,
    IllegalExtraction,
    InvalidPayload,
    Ok,
    Result,
    Success,
    failure,
    success,
)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor & Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    assert success(42).map(lambda x: x) == success(42)
    assert failure("fail").map(lambda x: x) == failure("fail")


def test_functor_composition() -> None:
    """Functor law: fmap (g . f) = fmap g . fmap f"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    assert success(5).map(f).map(g) == success(5).map(lambda x: g(f(x)))
    assert failure("e").map(f).map(g) == failure("e")


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: success(x * 2)
    assert success(42).and_then(f) == f(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    assert success(42).and_then(success) == success(42)
    assert failure("e").and_then(success) == failure("e")


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m: Result[int, str] = success(5)
    f: Callable[[int], Result[int, str]] = lambda x: success(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: success(x * 2)

    assert m.and_then(f).and_then(g) == m.and_then(lambda x: f(x).and_then(g))


# ═════════════════════════════════════════════════════════════════════════════
# Construction & State
# ═════════════════════════════════════════════════════════════════════════════


def test_success_construction() -> None:
    result = success(42)

    assert isinstance(result, Success)
    assert isinstance(result, Result)
    assert result.is_success()
    assert not result.is_failure()
    assert result.value == 42


def test_failure_construction() -> None:
    result = failure("failed")

    assert isinstance(result, Failure)
    assert isinstance(result, Result)
    assert result.is_failure()
    assert not result.is_success()
    assert result.error == "failed"


def test_of_constructors_and_aliases() -> None:
    assert Success.of(1) == Success(1) == success(1)
    assert Failure.of(1) == Failure(1) == failure(1)
    assert Ok is Success
    assert Err is Failure


def test_result_is_abstract() -> None:
    with pytest.raises(TypeError):
        Result()  # type: ignore[abstract]


@pytest.mark.parametrize("result", [success(1), failure("e")], ids=["success", "failure"])
def test_immutable(result: Result[int, str]) -> None:
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[union-attr]
    with pytest.raises(AttributeError):
        result.error = "x"  # type: ignore[union-attr]
    with pytest.raises(AttributeError):
        result.extra = 1  # type: ignore[attr-defined]


def test_none_payload_allowed_by_default() -> None:
    assert success(None).unwrap() is None
    assert failure(None).unwrap_failure() is None


@pytest.mark.usefixtures("strict_payloads")
def test_strict_payloads_reject_none() -> None:
    with pytest.raises(InvalidPayload) as exc_info:
        success(None)
    assert exc_info.value.code is ErrorCode.INVALID_PAYLOAD
    assert exc_info.value.error.variant == "Success"

    with pytest.raises(InvalidPayload):
        Failure(None)

    # Falsy non-None payloads are still fine
    assert success(0).unwrap() == 0
    assert failure("").unwrap_failure() == ""


@pytest.mark.usefixtures("strict_payloads")
def test_invalid_payload_is_value_error() -> None:
    with pytest.raises(ValueError):
        success(None)


# ═════════════════════════════════════════════════════════════════════════════
# Predicates
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("result", "expected"),
    [(success(1), True), (success(2), False), (failure(1), False), (failure(2), False)],
    ids=["success-match", "success-miss", "failure-1", "failure-2"],
)
def test_is_success_and(result: Result[int, int], expected: bool) -> None:
    assert result.is_success_and(lambda v: v == 1) is expected


@pytest.mark.parametrize(
    ("result", "expected"),
    [(success(1), False), (success(2), False), (failure(1), True), (failure(2), False)],
    ids=["success-1", "success-2", "failure-match", "failure-miss"],
)
def test_is_failure_and(result: Result[int, int], expected: bool) -> None:
    assert result.is_failure_and(lambda e: e == 1) is expected


def test_predicates_skip_other_variant(counter) -> None:
    assert failure(1).is_success_and(counter) is False
    assert success(1).is_failure_and(counter) is False
    assert counter.calls == []


# ═════════════════════════════════════════════════════════════════════════════
# Transformations
# ═════════════════════════════════════════════════════════════════════════════


def test_map() -> None:
    assert success(2).map(lambda x: x * 2) == success(4)
    assert failure("err").map(lambda x: x * 2) == failure("err")


def test_map_on_failure_passes_through_same_object(counter) -> None:
    err = failure("err")
    assert err.map(counter) is err
    assert counter.calls == []


def test_map_failure() -> None:
    assert failure("fail").map_failure(lambda e: f"Error: {e}") == failure("Error: fail")


def test_map_failure_on_success_passes_through(counter) -> None:
    ok = success(42)
    assert ok.map_failure(counter) is ok
    assert counter.calls == []


def test_map_or() -> None:
    assert success(1).map_or(3, lambda v: v + 1) == 2
    assert failure(1).map_or(3, lambda v: v + 1) == 3


def test_map_or_else(make_counter) -> None:
    on_failure = make_counter(returns="recovered")
    assert success(1).map_or_else(on_failure, lambda v: v + 1) == 2
    assert on_failure.calls == []

    on_success = make_counter(returns="unused")
    assert failure("boom").map_or_else(lambda e: f"handled {e}", on_success) == "handled boom"
    assert on_success.calls == []


def test_bimap() -> None:
    assert success(5).bimap(lambda x: x * 2, lambda e: f"E: {e}") == success(10)
    assert failure("fail").bimap(lambda x: x * 2, lambda e: f"E: {e}") == failure("E: fail")


def test_inspect(counter) -> None:
    ok = success(42)
    assert ok.inspect(counter) is ok
    assert counter.calls == [42]


def test_inspect_on_failure_is_noop(counter) -> None:
    err = failure("fail")
    assert err.inspect(counter) is err
    assert counter.calls == []


def test_inspect_failure(counter) -> None:
    err = failure("fail")
    assert err.inspect_failure(counter) is err
    assert counter.calls == ["fail"]

    ok = success(1)
    assert ok.inspect_failure(counter) is ok
    assert counter.calls == ["fail"]


# ═════════════════════════════════════════════════════════════════════════════
# Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap() -> None:
    assert success(1).unwrap() == 1

    with pytest.raises(IllegalExtraction, match="^unwrap called on a Failure value$") as exc_info:
        failure(1).unwrap()
    assert exc_info.value.code is ErrorCode.ILLEGAL_EXTRACTION
    assert exc_info.value.error.operation == "unwrap"
    assert exc_info.value.error.variant == "Failure"


def test_unwrap_failure() -> None:
    assert failure(1).unwrap_failure() == 1

    with pytest.raises(IllegalExtraction, match="^unwrap_failure called on a Success value$"):
        success(1).unwrap_failure()


def test_expect() -> None:
    assert success("cfg").expect("config must load") == "cfg"

    with pytest.raises(IllegalExtraction) as exc_info:
        failure("missing").expect("config must load")
    assert str(exc_info.value) == "config must load: expect called on a Failure value"
    assert exc_info.value.error.context == "config must load"


def test_expect_failure() -> None:
    assert failure("boom").expect_failure("should fail") == "boom"

    with pytest.raises(IllegalExtraction) as exc_info:
        success(1).expect_failure("should fail")
    assert str(exc_info.value).startswith("should fail: ")


def test_unwrap_or() -> None:
    assert success(5).unwrap_or(10) == 5
    assert failure("fail").unwrap_or(10) == 10


def test_unwrap_or_else(counter) -> None:
    assert success(5).unwrap_or_else(counter) == 5
    assert counter.calls == []
    assert failure("fail").unwrap_or_else(len) == 4


def test_ok_err_accessors() -> None:
    assert success(42).ok() == 42
    assert success(42).err() is None
    assert failure("x").ok() is None
    assert failure("x").err() == "x"


def test_match() -> None:
    handlers = {"success": lambda x: f"success: {x}", "failure": lambda e: f"failed: {e}"}
    assert success(42).match(**handlers) == "success: 42"
    assert failure("fail").match(**handlers) == "failed: fail"


def test_structural_pattern_matching() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Success(value):
                return f"value={value}"
            case Failure(error):
                return f"error={error}"
        return "unreachable"

    assert describe(success(3)) == "value=3"
    assert describe(failure("bad")) == "error=bad"


def test_to_tuple() -> None:
    assert success(42).to_tuple() == (42, None)
    assert failure("fail").to_tuple() == (None, "fail")


# ═════════════════════════════════════════════════════════════════════════════
# Chaining
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize(
    ("a", "b", "key"),
    [
        (success(1), success(2), "b"),
        (success(1), failure("b"), "b"),
        (failure("a"), success(2), "a"),
        (failure("a"), failure("b"), "a"),
    ],
    ids=["success-success", "success-failure", "failure-success", "failure-failure"],
)
def test_and(a: Result[int, str], b: Result[int, str], key: str) -> None:
    assert a.and_(b) is (a if key == "a" else b)


@pytest.mark.parametrize(
    ("a", "b", "key"),
    [
        (success(1), success(2), "a"),
        (success(1), failure("b"), "a"),
        (failure("a"), success(2), "b"),
        (failure("a"), failure("b"), "b"),
    ],
    ids=["success-success", "success-failure", "failure-success", "failure-failure"],
)
def test_or(a: Result[int, str], b: Result[int, str], key: str) -> None:
    assert a.or_(b) is (a if key == "a" else b)


def test_and_or_identity() -> None:
    assert success(1).and_(success(2)).or_(success(3)) == success(2)
    assert failure(1).or_(success(2)) == success(2)


def test_and_then() -> None:
    step = lambda x: success("big") if x > 1 else failure("small")
    assert success(2).and_then(step) == success("big")
    assert success(0).and_then(step) == failure("small")


def test_and_then_on_failure_short_circuits(counter) -> None:
    err = failure("fail")
    assert err.and_then(counter) is err
    assert counter.calls == []


def test_or_else() -> None:
    assert failure("fail").or_else(lambda _: success(42)) == success(42)


def test_or_else_on_success_short_circuits(counter) -> None:
    ok = success(5)
    assert ok.or_else(counter) is ok
    assert counter.calls == []


def test_railway_paths() -> None:
    """Success path runs every step; error path skips the rest."""
    def parse_int(s: str) -> Result[int, str]:
        return success(int(s)) if s.lstrip("-").isdigit() else failure(f"invalid: {s}")

    def validate_positive(n: int) -> Result[int, str]:
        return success(n) if n > 0 else failure("must be positive")

    def pipeline(raw: str) -> Result[int, str]:
        return success(raw).and_then(parse_int).and_then(validate_positive).map(lambda n: n * 2)

    assert pipeline("42") == success(84)
    assert pipeline("bad") == failure("invalid: bad")
    assert pipeline("-5") == failure("must be positive")


def test_fallback_chain() -> None:
    result = (
        failure("primary unavailable")
        .or_else(lambda _: failure("backup unavailable"))
        .or_else(lambda _: success("cached data"))
    )
    assert result == success("cached data")


# ═════════════════════════════════════════════════════════════════════════════
# Structure
# ═════════════════════════════════════════════════════════════════════════════


def test_transpose_success() -> None:
    assert success(None).transpose() is None
    assert success(3).transpose() == success(3)
    assert success(0).transpose() == success(0)  # falsy is not absent


def test_transpose_failure_returns_self() -> None:
    err = failure(None)
    assert err.transpose() is err


def test_flatten() -> None:
    inner_ok = success(42)
    assert success(inner_ok).flatten() is inner_ok

    inner_err = failure("fail")
    assert success(inner_err).flatten() is inner_err

    outer = failure("outer")
    assert outer.flatten() is outer


def test_flatten_requires_nested_result() -> None:
    with pytest.raises(TypeError, match="nested Result"):
        success(42).flatten()


@pytest.mark.parametrize("result", [success([1, 2]), failure({"code": 1})], ids=["success", "failure"])
def test_clone(result: Result[list[int], dict[str, int]]) -> None:
    copy = result.clone()

    assert copy == result
    assert copy is not result
    assert type(copy) is type(result)
    assert copy.to_tuple()[0] is result.to_tuple()[0]
    assert copy.to_tuple()[1] is result.to_tuple()[1]


def test_iteration() -> None:
    assert list(success(1)) == [1]
    assert list(failure(1)) == []
    assert [v for v in success("x")] == ["x"]


def test_iterators_are_independent_and_not_restartable() -> None:
    ok = success(1)
    first, second = iter(ok), iter(ok)

    assert next(first) == 1
    with pytest.raises(StopIteration):
        next(first)
    with pytest.raises(StopIteration):
        next(first)
    assert next(second) == 1


# ═════════════════════════════════════════════════════════════════════════════
# Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_truthiness() -> None:
    assert bool(success(0)) is True
    assert bool(failure("fail")) is False


def test_equality() -> None:
    assert success(42) == success(42)
    assert failure("fail") == failure("fail")
    assert success(42) != success(43)
    assert failure("fail") != failure("other")
    assert success(1) != failure(1)
    assert success(1) != 1


def test_hash() -> None:
    assert hash(success(1)) == hash(success(1))
    assert len({success(1), success(1), failure(1)}) == 2


def test_repr() -> None:
    assert repr(success(1)) == "Success(1)"
    assert repr(failure("x")) == "Failure('x')"
    assert str(success([1])) == "Success([1])"


@pytest.mark.parametrize("result", [success({"k": [1]}), failure(["e"])], ids=["success", "failure"])
def test_copy_and_pickle_round_trip(result: Result[dict[str, list[int]], list[str]]) -> None:
    import copy
    import pickle

    shallow = copy.copy(result)
    assert shallow == result and shallow is not result
    assert shallow.to_tuple()[0] is result.to_tuple()[0]
    assert shallow.to_tuple()[1] is result.to_tuple()[1]

    deep = copy.deepcopy(result)
    assert deep == result and type(deep) is type(result)
    payload = result.ok() if result.is_success() else result.err()
    assert (deep.ok() if deep.is_success() else deep.err()) is not payload

    restored = pickle.loads(pickle.dumps({"wrapped": result}))
    assert restored == {"wrapped": result}


def test_expect_with_non_string_message() -> None:
    with pytest.raises(IllegalExtraction) as exc_info:
        failure("e").expect(42)  # type: ignore[arg-type]
    assert str(exc_info.value) == "42: expect called on a Failure value"

    with pytest.raises(IllegalExtraction):
        success(1).expect_failure(["not", "text"])  # type: ignore[arg-type]
