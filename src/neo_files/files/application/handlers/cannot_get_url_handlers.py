"""Cannot-get-url fallback handlers.

Handlers for ``CannotGetUrlEvent``, configured per file context and run in
order until one of them marks the event handled::

    FILE_URL_FALLBACK_HANDLERS=generate_format_on_the_fly,return_source_file_url,raise_error

Each handler takes the event and mutates it in place. Handlers either raise,
resolve the event (``url`` set, ``handled`` True) or escalate it to
EXCEPTION_THROWN so that a later handler decides what the user sees.
"""

import logging
from typing import Tuple, Type

from ....core.shared import subscribed
from ...core.events import EVENT_DATA_CHANGED, CannotGetUrlEvent, DataChangedEvent
from ...core.exceptions import CannotGetUrl, FileDataNotSaved
from ...core.value_objects import CannotGetUrlCase
from .persistence_target import try_get_persistence_target

logger = logging.getLogger(__name__)


def raise_error(event: CannotGetUrlEvent) -> None:
    """Raise CannotGetUrl describing the event case.

    Raises:
        CannotGetUrl: Always
    """
    case = event.case
    file_name = getattr(event.sender, "name", None)
    format = event.format

    if case is CannotGetUrlCase.EMPTY_FILE:
        raise CannotGetUrl(
            "Cannot get url for empty file.",
            case=case
        )
    if case is CannotGetUrlCase.FILE_JUST_UPLOADED:
        raise CannotGetUrl(
            f"Cannot get url for file '{file_name}', the file was just uploaded.",
            case=case,
            file_name=file_name
        )
    if case is CannotGetUrlCase.FILE_NOT_FOUND:
        raise CannotGetUrl(
            f"Cannot get url for file '{file_name}', the file was not found in storage.",
            case=case,
            file_name=file_name
        )
    if case is CannotGetUrlCase.FORMAT_NOT_FOUND:
        raise CannotGetUrl(
            f"Cannot get url for formatted as '{format}' version of file '{file_name}', "
            "the version was not found in storage.",
            case=case,
            file_name=file_name,
            format=format
        )
    if case is CannotGetUrlCase.EXCEPTION_THROWN:
        cause = event.exception
        details = {}
        if cause is not None:
            details["cause"] = f"{type(cause).__name__}: {cause}"
        raise CannotGetUrl(
            f"Cannot get url for file '{file_name}'.",
            case=case,
            file_name=file_name,
            format=format,
            error_code=getattr(cause, "error_code", None),
            details=details
        ) from cause

    raise CannotGetUrl(
        "Cannot get url, some unknown server error.",
        case=case
    )


def _generate_format(
    event: CannotGetUrlEvent,
    propagate: Tuple[Type[BaseException], ...] = ()
) -> None:
    """Generate the missing format and resolve the event with its url.

    Errors listed in ``propagate`` are re-raised, any other error escalates
    the event.
    """
    file = event.sender
    try:
        file.generate_format(event.format)
        url = file.get_url(event.format, event.scheme)
    except propagate:
        raise
    except Exception as e:
        logger.warning(
            f"Failed to generate format '{event.format}' for file "
            f"'{getattr(file, 'name', None)}': {str(e)}"
        )
        event.escalate(e)
        return

    if url is not None:
        logger.info(f"Generated format '{event.format}' on the fly for file '{file.name}'")
        event.resolve(url)


def generate_format_on_the_fly(event: CannotGetUrlEvent) -> None:
    """Generate the requested formatted version of the file on the fly.

    Used for FORMAT_NOT_FOUND only. Changes of the file data caused by the
    generation are not saved to the owning record, use
    ``generate_format_on_the_fly_with_persistence`` for that.
    """
    if event.case is not CannotGetUrlCase.FORMAT_NOT_FOUND:
        return

    _generate_format(event)


def generate_format_on_the_fly_with_persistence(event: CannotGetUrlEvent) -> None:
    """Generate the formatted version and save changed file data to its record.

    Works like ``generate_format_on_the_fly``. When the file is attached to an
    existing record, data changes reported by the file while generating are
    written into the record attribute with a partial update. Failures to save
    propagate as FileDataNotSaved.
    """
    if event.case is not CannotGetUrlCase.FORMAT_NOT_FOUND:
        return

    file = event.sender
    target = try_get_persistence_target(file)
    if target is None:
        logger.debug(f"No persisted record for file '{getattr(file, 'name', None)}', skipping save")
        _generate_format(event)
        return

    def save_file_data(changed_event: DataChangedEvent) -> None:
        try:
            target.save(changed_event.new_file_data)
        except Exception as e:
            raise FileDataNotSaved(
                f"Cannot save data of file '{file.name}' into attribute '{target.attribute}'.",
                file_name=file.name,
                attribute=target.attribute
            ) from e
        logger.info(f"Saved regenerated data of file '{file.name}' into '{target.attribute}'")

    with subscribed(file, EVENT_DATA_CHANGED, save_file_data):
        _generate_format(event, propagate=(FileDataNotSaved,))


def return_default_url(event: CannotGetUrlEvent) -> None:
    """Resolve the event with the file's configured default url, if any."""
    url = event.sender.get_default_url(event.format, event.scheme)
    if url is not None:
        event.resolve(url)


def return_source_file_url(event: CannotGetUrlEvent) -> None:
    """Resolve the event with the url of the source (non-formatted) file.

    Used for FORMAT_NOT_FOUND only. Lookup errors escalate the event.
    """
    if event.case is not CannotGetUrlCase.FORMAT_NOT_FOUND:
        return

    try:
        url = event.sender.get_url(None, event.scheme)
    except Exception as e:
        logger.warning(f"Failed to get source url for file '{getattr(event.sender, 'name', None)}': {str(e)}")
        event.escalate(e)
        return

    if url is not None:
        event.resolve(url)


def return_empty_string(event: CannotGetUrlEvent) -> None:
    """Resolve the event with an empty string."""
    event.resolve("")


def return_hash(event: CannotGetUrlEvent) -> None:
    """Resolve the event with a hash ('#')."""
    event.resolve("#")


def return_about_blank(event: CannotGetUrlEvent) -> None:
    """Resolve the event with 'about:blank'."""
    event.resolve("about:blank")
