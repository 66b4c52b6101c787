# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tool notifications: missing classes and errors recorded during analysis."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from bugsarif.core.constants import (
    ERROR_DESCRIPTOR_ID_FORMAT,
    MISSING_CLASSES_DESCRIPTOR_ID,
    NO_MESSAGE_GIVEN,
    Level,
)
from bugsarif.models.sarif import (
    SarifDescriptorReference,
    SarifException,
    SarifMessage,
    SarifNotification,
    SarifStack,
    SarifStackFrame,
)
from bugsarif.sarif.locations import LocationHandler, StackFrameInfo


@dataclass(frozen=True)
class QueuedError:
    """An error recorded while the analysis ran."""

    sequence: int
    message: str
    cause: BaseException | None = None


def dotted_class_name(class_name: str) -> str:
    return class_name.replace("/", ".")


def config_notifications(missing_classes: Iterable[str] | None) -> list[SarifNotification]:
    names = [dotted_class_name(name) for name in missing_classes or ()]
    if not names:
        return []
    message = f"Classes needed for analysis were missing: [{', '.join(names)}]"
    return [_notification(MISSING_CLASSES_DESCRIPTOR_ID, message)]


def execution_notifications(
    errors: Iterable[QueuedError], location_handler: LocationHandler
) -> list[SarifNotification]:
    return [error_notification(error, location_handler) for error in errors]


def error_notification(error: QueuedError, location_handler: LocationHandler) -> SarifNotification:
    descriptor_id = ERROR_DESCRIPTOR_ID_FORMAT.format(sequence=error.sequence)
    exception = None
    if error.cause is not None:
        exception = build_exception(error.cause, location_handler)
    return _notification(descriptor_id, error.message, exception)


def build_exception(exc: BaseException, location_handler: LocationHandler) -> SarifException:
    """Expand *exc* and everything chained to it into a SARIF exception tree.

    Inner exceptions are the explicit cause followed by the suppressed
    exceptions (see :func:`suppressed_exceptions`).
    """
    message = _message_of(exc)
    inner: list[BaseException] = []
    if exc.__cause__ is not None:
        inner.append(exc.__cause__)
    inner.extend(suppressed_exceptions(exc))
    return SarifException(
        kind=exception_kind(exc),
        message=message,
        stack=_stack(exc, message, location_handler),
        innerExceptions=[build_exception(e, location_handler) for e in inner],
    )


def suppressed_exceptions(exc: BaseException) -> list[BaseException]:
    """Exceptions hidden behind *exc* other than its explicit cause.

    That is the implicit context (an exception raised while handling another
    one), unless it is suppressed or already the cause, followed by the
    members of an exception group.
    """
    suppressed: list[BaseException] = []
    context = exc.__context__
    if context is not None and not exc.__suppress_context__ and context is not exc.__cause__:
        suppressed.append(context)
    if isinstance(exc, BaseExceptionGroup):
        suppressed.extend(exc.exceptions)
    return suppressed


def exception_kind(exc: BaseException) -> str:
    exc_type = type(exc)
    if exc_type.__module__ == "builtins":
        return exc_type.__qualname__
    return f"{exc_type.__module__}.{exc_type.__qualname__}"


def _message_of(exc: BaseException) -> str:
    if isinstance(exc, BaseExceptionGroup):
        message = exc.message
    else:
        message = str(exc)
    return message or NO_MESSAGE_GIVEN


def _stack(exc: BaseException, message: str, location_handler: LocationHandler) -> SarifStack:
    frames = [
        SarifStackFrame(location=location_handler.stack_location(frame))
        for frame in StackFrameInfo.from_traceback(exc.__traceback__)
    ]
    return SarifStack(message=SarifMessage(text=message), frames=frames)


def _notification(
    descriptor_id: str, message: str, exception: SarifException | None = None
) -> SarifNotification:
    return SarifNotification(
        descriptor=SarifDescriptorReference(id=descriptor_id),
        message=SarifMessage(text=message),
        level=Level.ERROR,
        exception=exception,
    )
