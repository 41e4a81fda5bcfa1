"""Runtime checks for return-type stability."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

import jax
from loguru import logger


class TypeInstabilityError(TypeError):
    """Raised when a function returns more than one type for similar inputs."""

    def __init__(self, fn_name: str, types: set[type]):
        self.fn_name = fn_name
        self.types = types
        names = ", ".join(sorted(t.__name__ for t in types))
        super().__init__(f"{fn_name} returned {len(types)} different types: {names}")


def return_types(
    fn: Callable[..., Any],
    samples: Iterable[Sequence[Any]],
) -> set[type]:
    """Collect the concrete return types of `fn` over argument tuples."""
    return {type(fn(*args)) for args in samples}


def is_type_stable(
    fn: Callable[..., Any],
    samples: Iterable[Sequence[Any]],
) -> bool:
    """Whether `fn` returns exactly one type across all `samples`.

    This is an empirical check: it only sees the branches the samples reach,
    so no samples means no evidence and the result is False.
    """
    return len(return_types(fn, samples)) == 1


def check_type_stable(
    fn: Callable[..., Any],
    samples: Iterable[Sequence[Any]],
) -> None:
    """Raise `TypeInstabilityError` if `fn` returns more than one type.

    Raises:
        ValueError: If `samples` is empty
        TypeInstabilityError: If more than one return type is observed
    """
    types = return_types(fn, samples)
    name = getattr(fn, "__qualname__", repr(fn))
    if not types:
        raise ValueError(f"No samples given to check {name}")
    if len(types) > 1:
        raise TypeInstabilityError(name, types)
    logger.debug(f"{name} is type-stable over samples")


def count_traces(fn: Callable[..., Any], inputs: Iterable[Sequence[Any]]) -> int:
    """Count how many times `jax.jit` traces `fn` across `inputs`.

    JAX compiles once per distinct abstract signature (shapes and dtypes).
    Call sites whose argument types never change trace exactly once; mixing
    dtypes or shapes forces a retrace for each new combination.
    """
    n_traces = 0

    def traced(*args):
        nonlocal n_traces
        n_traces += 1  # Runs at trace time only
        return fn(*args)

    jitted = jax.jit(traced)
    for args in inputs:
        jax.block_until_ready(jitted(*args))

    logger.debug(f"{getattr(fn, '__qualname__', fn)} traced {n_traces} time(s)")
    return n_traces
