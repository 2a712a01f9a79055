"""Observability helpers for instrumenting engine operations."""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from engine_app.logging_config import get_logger, log_event, operation_context

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _argument_summary(arguments: Dict[str, Any]) -> Dict[str, Any]:
    summary: Dict[str, Any] = {}
    for key, value in arguments.items():
        if key == "self":
            continue
        if isinstance(value, (list, tuple)):
            summary[key] = f"<{len(value)} entries>"
        elif isinstance(value, dict):
            summary[key] = sorted(value)
        else:
            summary[key] = value
    return summary


def instrument_operation(
    operation_name: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Run a callable inside its own operation context with start/finish events.

    Arguments are bound against the wrapped signature. With ``input_model``
    set, the arguments named by the model's fields are validated and replaced
    by their coerced values before the call; a failure is logged and handed to
    ``on_validation_error`` when given, otherwise re-raised.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()

            with operation_context(operation_name):
                start = time.perf_counter()
                if input_model is not None:
                    fields = {name for name in input_model.model_fields if name in bound.arguments}
                    try:
                        validated = input_model.model_validate({name: bound.arguments[name] for name in fields})
                    except ValidationError as exc:
                        log_event(
                            LOGGER,
                            logging.WARNING,
                            "operation_validation_failed",
                            errors=[f"{'.'.join(map(str, error['loc']))}: {error['msg']}" for error in exc.errors()],
                        )
                        if on_validation_error is not None:
                            return on_validation_error(exc)
                        raise
                    bound.arguments.update(validated.model_dump(include=fields))

                log_event(LOGGER, logging.INFO, "operation_started", arguments=_argument_summary(bound.arguments))
                try:
                    result = func(*bound.args, **bound.kwargs)
                except Exception:
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "operation_failed",
                        duration_ms=round((time.perf_counter() - start) * 1000, 2),
                        exc_info=True,
                    )
                    raise
                log_event(
                    LOGGER,
                    logging.INFO,
                    "operation_completed",
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]
