from dataclasses import dataclass, field
from typing import Dict, List, Optional
import json
import logging
from pydantic import ValidationError
from core.activity import Timetable, clone_timetable
from schemas.timetable.activity import (
    TemplateStoreAdapter,
    records_to_timetable,
    timetable_to_records,
)
from exceptions.custom_errors import TemplateImportError
from utils.constants import HISTORY_LIMIT

logger = logging.getLogger(__name__)


@dataclass
class TimetableState:
    """
    A session object that owns the live timetable and everything recorded
    around it.

    Every read hands out an independent copy and every write stores one, so
    nothing outside the session can alias its internals.
    """

    current: Timetable = field(default_factory=list)
    """The live timetable for the day."""
    default: Timetable = field(default_factory=list)
    """The timetable `reset_to_default` returns to."""
    templates: Dict[str, Timetable] = field(default_factory=dict)
    """Named timetable snapshots, independent from the live timetable."""
    day_overrides: Dict[str, str] = field(default_factory=dict)
    """A dictionary mapping "YYYY-MM-DD" dates to template names."""
    undo_stack: List[Timetable] = field(default_factory=list)
    redo_stack: List[Timetable] = field(default_factory=list)
    history_limit: Optional[int] = HISTORY_LIMIT
    """Maximum snapshots kept per stack; None keeps all of them."""
    clock: Optional[int] = None
    """Current time in minutes since midnight, None until set."""

    # == Live timetable ==
    def set_default(self, timetable: Timetable) -> None:
        self.default = clone_timetable(timetable)
        self.current = clone_timetable(timetable)

    def get(self) -> Timetable:
        return clone_timetable(self.current)

    def get_default(self) -> Timetable:
        return clone_timetable(self.default)

    def set(self, timetable: Timetable) -> None:
        """Replace the live timetable, recording the previous one for undo."""
        self._push(self.undo_stack, self.current)
        self.redo_stack.clear()
        self.current = clone_timetable(timetable)

    def reset_to_default(self) -> None:
        self.set(self.default)

    # == History ==
    def undo(self) -> bool:
        if not self.undo_stack:
            return False
        self._push(self.redo_stack, self.current)
        self.current = self.undo_stack.pop()
        return True

    def redo(self) -> bool:
        if not self.redo_stack:
            return False
        self._push(self.undo_stack, self.current)
        self.current = self.redo_stack.pop()
        return True

    def _push(self, stack: List[Timetable], timetable: Timetable) -> None:
        stack.append(clone_timetable(timetable))
        if self.history_limit is not None and len(stack) > self.history_limit:
            del stack[: len(stack) - self.history_limit]

    # == Templates ==
    def save_template(self, name: str, timetable: Timetable) -> None:
        self.templates[name] = clone_timetable(timetable)

    def load_template(self, name: str) -> bool:
        if name not in self.templates:
            logger.info(f"Template '{name}' not found; timetable left unchanged.")
            return False
        self.set(self.templates[name])
        return True

    def list_template_names(self) -> List[str]:
        return list(self.templates.keys())

    def get_templates(self) -> Dict[str, Timetable]:
        return {name: clone_timetable(tt) for name, tt in self.templates.items()}

    def export_templates(self) -> str:
        """Serialize the whole template store as indented JSON."""
        payload = {
            name: timetable_to_records(tt) for name, tt in self.templates.items()
        }
        return json.dumps(payload, indent=2)

    def import_templates(self, text: str) -> bool:
        """
        Merge an exported template store into this one, overwriting templates
        with the same name.

        Returns False and leaves the store untouched if any part of the input
        is malformed.
        """
        try:
            parsed = parse_templates(text)
        except TemplateImportError as e:
            logger.error(f"❌ Invalid template import: {e}")
            return False
        self.templates.update(parsed)
        logger.info(f"📥 Imported {len(parsed)} template(s).")
        return True

    # == Day overrides ==
    def set_day_override(self, date_str: str, template_name: str) -> None:
        self.day_overrides[date_str] = template_name

    def get_template_for_date(self, date_str: str) -> Optional[str]:
        return self.day_overrides.get(date_str)

    # == Clock ==
    def set_clock(self, minutes: Optional[int]) -> None:
        self.clock = minutes

    def get_clock(self) -> Optional[int]:
        return self.clock


def parse_templates(text: str) -> Dict[str, Timetable]:
    """
    Parse an exported template store.

    Raises:
        TemplateImportError: If the text is not a JSON object mapping names to
            arrays of valid activity records.
    """
    try:
        store = TemplateStoreAdapter.validate_json(text)
    except ValidationError as e:
        raise TemplateImportError(str(e)) from e
    return {name: records_to_timetable(records) for name, records in store.items()}
