# -*- coding: utf-8 -*-
"""
Date mask engine for DD/MM/YYYY text fields.

Widget-independent: a line edit feeds its text in on every edit and calls
blur() on focus-out, then shows `text`. The reported value is always an
ISO date string or None.

Usage:
    engine = DateMaskEngine(min_date="2000-01-01")
    engine.value_changed.connect(on_date)
    line_edit.textEdited.connect(lambda t: line_edit.setText(engine.feed(t)))
"""

import re
from datetime import date
from enum import Enum
from typing import Optional, Union

from PyQt5.QtCore import QObject, pyqtSignal

from utils.datetime_utils import parse_date, to_display_date
from utils.logger import get_logger

logger = get_logger(__name__)

MAX_DIGITS = 8
COMPLETE_LENGTH = 10

DateLike = Union[str, date, None]


class MaskState(Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    COMPLETE = "complete"


def mask_digits(text: str) -> str:
    """Digits of `text` (at most 8) with "/" after the day and month."""
    digits = re.sub(r"\D", "", text or "")[:MAX_DIGITS]
    if len(digits) <= 2:
        return digits
    if len(digits) <= 4:
        return f"{digits[:2]}/{digits[2:]}"
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:]}"


def parse_masked(text: str) -> Optional[date]:
    """Calendar date of a complete DD/MM/YYYY text, None when invalid."""
    if len(text or "") != COMPLETE_LENGTH:
        return None
    try:
        day, month, year = (int(part) for part in text.split("/"))
        return date(year, month, day)
    except ValueError:
        return None


class DateMaskEngine(QObject):
    """
    EMPTY -> PARTIAL (1..9 chars) -> COMPLETE (10 chars).

    The masked text is rebuilt from the digit stream on every feed.
    A complete date outside min/max is replaced by the violated bound.
    On blur only a complete, valid date survives; anything else is cleared.
    """

    value_changed = pyqtSignal(object)  # ISO date string or None

    def __init__(self, min_date: DateLike = None, max_date: DateLike = None, parent=None):
        super().__init__(parent)
        self.min_date: Optional[date] = parse_date(min_date)
        self.max_date: Optional[date] = parse_date(max_date)
        self.text = ""
        self.value: Optional[str] = None

    @property
    def state(self) -> MaskState:
        if not self.text:
            return MaskState.EMPTY
        if len(self.text) < COMPLETE_LENGTH:
            return MaskState.PARTIAL
        return MaskState.COMPLETE

    def _report(self, value: Optional[str]):
        self.value = value
        self.value_changed.emit(value)

    def _clamp(self, parsed: date) -> date:
        if self.min_date and parsed < self.min_date:
            return self.min_date
        if self.max_date and parsed > self.max_date:
            return self.max_date
        return parsed

    def feed(self, text: str) -> str:
        """
        Apply a keystroke's worth of input.

        Returns:
            The text the field should display
        """
        self.text = mask_digits(text)

        if self.state != MaskState.COMPLETE:
            self._report(None)
            return self.text

        parsed = parse_masked(self.text)
        if parsed is None:
            self._report(None)
            return self.text

        clamped = self._clamp(parsed)
        if clamped != parsed:
            logger.debug(f"Date {parsed} clamped to {clamped}")
            self.text = to_display_date(clamped)
        self._report(clamped.isoformat())
        return self.text

    def blur(self) -> str:
        """Commit on focus-out: a valid complete date or nothing."""
        parsed = parse_masked(self.text)
        if parsed is None:
            if self.text:
                logger.debug(f"Clearing incomplete or invalid date {self.text!r}")
            self.text = ""
            self._report(None)
            return self.text

        clamped = self._clamp(parsed)
        self.text = to_display_date(clamped)
        self._report(clamped.isoformat())
        return self.text

    def set_value(self, value: DateLike) -> str:
        """Show an ISO (or date) value without reporting it back."""
        parsed = parse_date(value)
        self.text = to_display_date(parsed) if parsed else ""
        self.value = parsed.isoformat() if parsed else None
        return self.text
