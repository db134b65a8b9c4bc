"""Ordered fallback over configuration-gated sources.

Every resolution rule is a fixed sequence of sources. Disabled sources are
skipped without calling their supplier; the first usable result wins.
"""

from typing import Callable, Iterable, NamedTuple

from api_doc_meta.logging import get_logger

logger = get_logger("resolver")


class Source(NamedTuple):
    label: str
    enabled: bool
    supplier: Callable[[], object]


def always(label: str, supplier: Callable[[], object]) -> Source:
    return Source(label, True, supplier)


def first_non_blank(sources: Iterable[Source], default: str = "") -> str:
    """Return the first enabled source's non-blank text, stripped."""
    for source in sources:
        if not source.enabled:
            continue
        value = source.supplier()
        if value is None:
            continue
        text = str(value).strip()
        if text:
            logger.debug("resolved %r from %s", text, source.label)
            return text
    return default


def first_true(sources: Iterable[Source]) -> bool:
    """True as soon as one enabled source's supplier returns truthy."""
    for source in sources:
        if source.enabled and source.supplier():
            logger.debug("matched %s", source.label)
            return True
    return False
