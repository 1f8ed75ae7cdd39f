"""Serverless-style entry point: one event in, one structured result out."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, TypedDict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .pipeline import TravelPipeline, build_pipeline_from_env

logger = logging.getLogger(__name__)

STATUS_OK = 200
STATUS_BAD_REQUEST = 400


class HandlerResult(TypedDict):
    body: str
    status: int


class InvalidEventError(ValueError):
    """Raised when an inbound event does not carry a usable question."""


class QuestionEvent(BaseModel):
    """The only field the handler reads from an inbound event."""

    model_config = ConfigDict(str_strip_whitespace=True)

    question: str = Field(min_length=1)


def parse_event(event: Any) -> QuestionEvent:
    if not isinstance(event, Mapping):
        raise InvalidEventError(f"Event must be a mapping, got {type(event).__name__}")
    try:
        return QuestionEvent.model_validate(dict(event))
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'event'}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidEventError(f"Invalid event: {details}") from exc


def handle_event(
    event: Any,
    pipeline: TravelPipeline | None = None,
    *,
    pipeline_factory: Callable[[], TravelPipeline] | None = None,
) -> HandlerResult:
    """
    Answer the event's question with ``pipeline``.

    Malformed events become a 400 result before any step runs, and before
    ``pipeline_factory`` is called. Failures inside the pipeline are not
    caught and reach the hosting runtime.
    """
    try:
        request = parse_event(event)
    except InvalidEventError as exc:
        logger.warning("Rejected event: %s", exc)
        return {"body": str(exc), "status": STATUS_BAD_REQUEST}

    if pipeline is None:
        if pipeline_factory is None:
            raise ValueError("handle_event requires a pipeline or a pipeline_factory")
        pipeline = pipeline_factory()

    answer = pipeline.get_response(request.question)
    return {"body": answer, "status": STATUS_OK}


def lambda_handler(event: Any, context: Any = None) -> HandlerResult:  # noqa: ARG001 - runtime signature
    return handle_event(event, pipeline_factory=build_pipeline_from_env)
