# parsers/context.py

import logging
from dataclasses import dataclass, field
from typing import Any

from .models import ParseDiagnostic
from .sections import Section

logger = logging.getLogger(__name__)


class FieldAccumulator:
    """
    Collects field values for one record.

    - First value wins: set_once ignores fields that already hold a value
    - Unset fields are simply missing from `values`
    """

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self._values: dict[str, Any] = {}

    def is_set(self, name: str) -> bool:
        return name in self._values

    def set_once(self, name: str, value: Any) -> bool:
        if name in self._values:
            logger.debug("Ignoring duplicate value for %s.%s", self.prefix, name)
            return False
        self._values[name] = value
        return True

    def path(self, name: str) -> str:
        return f"{self.prefix}.{name}"

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._values)


@dataclass
class ParserContext:
    """Mutable state of a single parse. Never shared between parses."""

    section: Section = Section.NONE
    skip_next: bool = False
    line_number: int = 0
    general: FieldAccumulator = field(
        default_factory=lambda: FieldAccumulator("general")
    )
    media: FieldAccumulator = field(default_factory=lambda: FieldAccumulator("media"))
    source: FieldAccumulator = field(
        default_factory=lambda: FieldAccumulator("media.source")
    )
    encoded: FieldAccumulator = field(
        default_factory=lambda: FieldAccumulator("media.encoded")
    )
    description: list[str] = field(default_factory=list)
    diagnostics: list[ParseDiagnostic] = field(default_factory=list)

    def report(self, field_path: str, value: str, message: str) -> None:
        logger.warning(
            "Line %d: %s (%s=%r)", self.line_number, message, field_path, value
        )
        self.diagnostics.append(
            ParseDiagnostic(
                line_number=self.line_number,
                field=field_path,
                value=value,
                message=message,
            )
        )
