"""Record to entity hydration with locale substitution.

This module holds one explicit field mapping function per CN level
and the hydrator that applies the translator on top of them.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from core.constants import NAME_FIELD, TRANSLATION_DOMAIN
from core.logging_config import get_logger
from core.types import Chapter, CnCode, Heading, Record, Section, Subheading
from translation.translator import Translator

EntityT = TypeVar("EntityT")

_LOGGER = get_logger(__name__)


class EntityHydrator(Generic[EntityT]):
    """Convert raw records into typed, locale-aware entities.

    Results are not cached; repeated calls re-run the translator.
    """

    def __init__(
        self,
        mapper: Callable[[Record, str | None], EntityT],
        translator: Translator | None = None,
        locale: str | None = None,
        domain: str = TRANSLATION_DOMAIN,
    ) -> None:
        """Create a hydrator.

        Args:
            mapper: Field mapping function for the target entity type.
            translator: Optional translation capability.
            locale: Locale passed to the translator; its default when None.
            domain: Translation catalog domain.
        """
        self._mapper = mapper
        self._translator = translator
        self._locale = locale
        self._domain = domain

    def hydrate(self, record: Record) -> EntityT:
        """Map one record onto an entity.

        Args:
            record: Raw snapshot record.

        Returns:
            Hydrated entity with ``translated_name`` set when available.
        """
        translated_name = None
        if self._translator is not None and record.get(NAME_FIELD) is not None:
            translated_name = self._translator.translate(
                str(record[NAME_FIELD]), self._locale, self._domain
            )
        return self._mapper(record, translated_name)


def section_from_record(record: Record, translated_name: str | None = None) -> Section:
    """Map a ``cnSections`` record onto a Section."""
    return Section(
        code=_text(record, "code"),
        raw_code=_text(record, "rawCode"),
        version=_int(record, "version"),
        name=_text(record, "name"),
        translated_name=translated_name,
    )


def chapter_from_record(record: Record, translated_name: str | None = None) -> Chapter:
    """Map a ``cnChapters`` record onto a Chapter."""
    return Chapter(
        code=_text(record, "code"),
        raw_code=_text(record, "rawCode"),
        version=_int(record, "version"),
        section=_text(record, "section"),
        name=_text(record, "name"),
        translated_name=translated_name,
    )


def heading_from_record(record: Record, translated_name: str | None = None) -> Heading:
    """Map a ``cnHeadings`` record onto a Heading."""
    return Heading(
        code=_text(record, "code"),
        raw_code=_text(record, "rawCode"),
        version=_int(record, "version"),
        section=_text(record, "section"),
        chapter=_text(record, "chapter"),
        name=_text(record, "name"),
        translated_name=translated_name,
    )


def subheading_from_record(record: Record, translated_name: str | None = None) -> Subheading:
    """Map a ``cnSubheadings`` record onto a Subheading."""
    return Subheading(
        code=_text(record, "code"),
        raw_code=_text(record, "rawCode"),
        version=_int(record, "version"),
        section=_text(record, "section"),
        chapter=_text(record, "chapter"),
        heading=_text(record, "heading"),
        name=_text(record, "name"),
        translated_name=translated_name,
    )


def cn_code_from_record(record: Record, translated_name: str | None = None) -> CnCode:
    """Map a ``cnCodes`` record onto a CnCode."""
    supplementary_unit = record.get("supplementaryUnit")
    return CnCode(
        code=_text(record, "code"),
        raw_code=_text(record, "rawCode"),
        version=_int(record, "version"),
        section=_text(record, "section"),
        chapter=_text(record, "chapter"),
        heading=_text(record, "heading"),
        subheading=_text(record, "subheading"),
        name=_text(record, "name"),
        supplementary_unit=str(supplementary_unit) if supplementary_unit is not None else None,
        translated_name=translated_name,
    )


def _text(record: Record, field: str) -> str:
    value = record.get(field)
    return "" if value is None else str(value)


def _int(record: Record, field: str) -> int:
    value: Any = record.get(field)
    try:
        return int(value)
    except (TypeError, ValueError):
        _LOGGER.warning(
            "record_field_invalid",
            field=field,
            value=repr(value),
            code=record.get("code"),
        )
        return 0
