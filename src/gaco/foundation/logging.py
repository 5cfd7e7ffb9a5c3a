from __future__ import annotations

import logging


def configure_gaco_logging(*, level: int = logging.INFO) -> None:
    """
    Attach a console handler that prints GACO's progress lines.

    With ``GACO.set_verbosity(n)`` and ``n > 0``, every run emits a column
    header followed by one line per logged generation (generation,
    evaluations, best fitness, dx, feasible count, violation, oracle, kernel
    spread, focus divisor) at INFO level under the ``gaco`` logger. Those lines
    only reach the terminal once a handler exists, which this helper provides.

    Notes:
        - This is opt-in; library modules never call logging.basicConfig().
        - Nothing happens if the root logger or the "gaco" logger already has
          handlers, so an application's own logging setup always wins.
    """
    root = logging.getLogger()
    gaco_logger = logging.getLogger("gaco")

    if root.handlers or gaco_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    gaco_logger.addHandler(handler)
    gaco_logger.setLevel(level)
    gaco_logger.propagate = False


__all__ = ["configure_gaco_logging"]
