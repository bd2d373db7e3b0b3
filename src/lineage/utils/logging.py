from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to log calls at DEBUG level; exceptions are logged and re-raised.

    Graph arguments are logged by size rather than by value.
    """

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Calling %s args=%s kwargs=%s", func.__name__, _brief_all(args), kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.exception("Error in %s: %s", func.__name__, e)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("%s returned %s", func.__name__, _brief(result))
            return result

        return _wrapper

    return _decorator


def _brief(value: Any) -> str:
    nodes = getattr(value, "nodes", None)
    links = getattr(value, "links", None)
    if isinstance(nodes, dict) and isinstance(links, dict):
        return f"<{type(value).__name__} nodes={len(nodes)} links={len(links)}>"
    return repr(value)


def _brief_all(args: tuple) -> str:
    return "(" + ", ".join(_brief(a) for a in args) + ")"


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through rich; WARNING by default, DEBUG when verbose."""
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )
