"""
Phased interception pipelines for requests and responses
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = [
    "UNCHANGED",
    "InterceptResult",
    "Pipeline",
    "Replaced",
    "RequestPipeline",
    "ResponsePipeline",
    "Unchanged",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unchanged:
    """The interceptor passed the subject through untouched."""


@dataclass(frozen=True)
class Replaced:
    """The interceptor substituted ``value`` for the subject."""

    value: Any


UNCHANGED = Unchanged()

InterceptResult = Unchanged | Replaced
Interceptor = Callable[[Any, Any], InterceptResult]


class Pipeline:
    """
    An ordered list of named phases, each holding interceptors.

    ``execute`` feeds the subject through every interceptor, phase by phase
    and in registration order within a phase. An interceptor returning
    ``Replaced`` hands its value to the interceptors that follow.
    """

    def __init__(self, *phases: str):
        if len(set(phases)) != len(phases):
            raise ValueError(f"Duplicate phase in {phases}")
        self.phases = phases
        self._interceptors: dict[str, list[Interceptor]] = {phase: [] for phase in phases}

    def intercept(self, phase: str, interceptor: Interceptor):
        try:
            self._interceptors[phase].append(interceptor)
        except KeyError as err:
            raise ValueError(f"Unknown phase '{phase}'. Must be one of {', '.join(self.phases)}") from err

    def execute(self, context: Any, subject: Any) -> Any:
        for phase in self.phases:
            for interceptor in self._interceptors[phase]:
                result = interceptor(context, subject)
                if isinstance(result, Replaced):
                    logger.debug("%s phase: subject replaced by %r", phase, interceptor)
                    subject = result.value
                elif not isinstance(result, Unchanged):
                    raise TypeError(
                        f"Interceptor {interceptor!r} returned {type(result).__name__}, "
                        "expected Unchanged or Replaced"
                    )
        return subject


class RequestPipeline(Pipeline):
    BEFORE = "before"
    STATE = "state"
    TRANSFORM = "transform"
    RENDER = "render"
    SEND = "send"

    def __init__(self):
        super().__init__(self.BEFORE, self.STATE, self.TRANSFORM, self.RENDER, self.SEND)


class ResponsePipeline(Pipeline):
    RECEIVE = "receive"
    PARSE = "parse"
    TRANSFORM = "transform"
    STATE = "state"
    AFTER = "after"

    def __init__(self):
        super().__init__(self.RECEIVE, self.PARSE, self.TRANSFORM, self.STATE, self.AFTER)
