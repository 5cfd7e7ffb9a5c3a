"""Per-generation log records."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Sequence


class LogRecord(NamedTuple):
    generation: int
    evaluations: int
    best_fitness: float
    dx: float
    feasible_count: int
    constraint_violation: float
    oracle_value: float
    kernel_spread: float
    focus_effective: float


# Counters compare exactly after a round trip; reals only within a tolerance.
EXACT_FIELDS: tuple[str, ...] = ("generation", "evaluations", "feasible_count")
APPROX_FIELDS: tuple[str, ...] = tuple(f for f in LogRecord._fields if f not in EXACT_FIELDS)

HEADER = (
    f"{'Gen:':>7}{'Fevals:':>10}{'Best:':>15}{'dx:':>13}{'Feasible:':>11}"
    f"{'Violation:':>13}{'Oracle:':>13}{'Kernel:':>13}{'Focus:':>10}"
)


def format_record(record: LogRecord) -> str:
    return (
        f"{record.generation:>7}{record.evaluations:>10}{record.best_fitness:>15.6g}{record.dx:>13.5g}"
        f"{record.feasible_count:>11}{record.constraint_violation:>13.5g}{record.oracle_value:>13.5g}"
        f"{record.kernel_spread:>13.5g}{record.focus_effective:>10.4g}"
    )


def record_from_sequence(values: Sequence[float]) -> LogRecord:
    if len(values) != len(LogRecord._fields):
        raise ValueError(f"A log record has {len(LogRecord._fields)} fields, got {len(values)}.")
    return LogRecord._make(
        int(v) if name in EXACT_FIELDS else float(v) for name, v in zip(LogRecord._fields, values)
    )


def records_match(a: LogRecord, b: LogRecord, rel_tol: float = 1e-6) -> bool:
    """Exact equality on the counters, ``math.isclose`` on the real-valued fields."""
    for name in EXACT_FIELDS:
        if getattr(a, name) != getattr(b, name):
            return False
    return all(math.isclose(getattr(a, name), getattr(b, name), rel_tol=rel_tol) for name in APPROX_FIELDS)


def logs_match(a: Iterable[LogRecord], b: Iterable[LogRecord], rel_tol: float = 1e-6) -> bool:
    a, b = list(a), list(b)
    return len(a) == len(b) and all(records_match(x, y, rel_tol) for x, y in zip(a, b))


__all__ = [
    "LogRecord",
    "EXACT_FIELDS",
    "APPROX_FIELDS",
    "HEADER",
    "format_record",
    "record_from_sequence",
    "records_match",
    "logs_match",
]
