"""Best-effort parsing of free-form text into a UTC DateTime."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

import pendulum

from pycoerce._errors import ERR_MSG_UNSUPPORTED_TYPE, UnsupportedTypeError
from pycoerce.format import Formatter, formatters as registered_formatters

logger = logging.getLogger(__name__)


def from_string(
    text: str,
    *,
    formatters: Mapping[str, Formatter] | Iterable[Formatter] | None = None,
) -> pendulum.DateTime | None:
    """Return a DateTime from ``text`` using the first formatter that parses it.

    Formatters are tried in order: the registry order
    (``pycoerce.format.FORMATTER_ORDER`` followed by later registrations)
    unless ``formatters`` is given. Text that no formatter accepts yields
    ``None``.

    Args:
        text: The text to parse.
        formatters: Optional formatters to try instead of the registry,
            either a name -> Formatter mapping or an iterable of Formatters.

    Returns:
        A DateTime in UTC, or None if nothing matched.

    Raises:
        UnsupportedTypeError: If ``text`` is not a str.
    """
    if not isinstance(text, str):
        raise UnsupportedTypeError(
            ERR_MSG_UNSUPPORTED_TYPE,
            f"from_string expects str, got {type(text).__name__}",
        )
    if formatters is None:
        candidates: Iterable[Formatter] = registered_formatters.values()
    elif isinstance(formatters, Mapping):
        candidates = formatters.values()
    else:
        candidates = formatters

    for fmt in candidates:
        result = fmt.try_parse(text)
        if result.ok:
            logger.debug("parsed %r with formatter %s", text, fmt.name)
            return result.value
    return None
