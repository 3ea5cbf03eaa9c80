"""Date/time parsing for deadline and event boundaries - no I/O."""

import re
from dataclasses import dataclass
from datetime import datetime

DISPLAY_FORMAT = "%b %d %Y, %H:%M"

# strptime reads "900" as 09:00; compact times must be written "0900".
COMPACT_TIME = "%H%M"
_FOUR_DIGIT_TIME = re.compile(r"(?<!\d)\d{4}$")


@dataclass(frozen=True)
class DateFormats:
    """
    Ordered strptime patterns tried by DateTimeParser.

    Date-time formats are tried first, then date-only formats (which resolve
    to midnight). strptime accepts both "02" and "2" for %d and %m.
    """

    datetime_formats: tuple[str, ...]
    date_formats: tuple[str, ...]
    display_format: str = DISPLAY_FORMAT

    def with_display_format(self, display_format: str) -> "DateFormats":
        """Copy with a different display format, keeping it parseable."""
        datetime_formats = tuple(
            display_format if f == self.display_format else f for f in self.datetime_formats
        )
        return DateFormats(datetime_formats, self.date_formats, display_format)


DEFAULT_FORMATS = DateFormats(
    datetime_formats=(
        "%d-%m-%Y %H%M",
        "%d/%m/%Y %H%M",
        DISPLAY_FORMAT,
    ),
    date_formats=(
        "%d-%m-%Y",
        "%d/%m/%Y",
    ),
)


def _try_parse(text: str, fmt: str) -> datetime | None:
    """Single attempt; None on mismatch."""
    if fmt.endswith(COMPACT_TIME) and not _FOUR_DIGIT_TIME.search(text):
        return None
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        return None


class DateTimeParser:
    """Parses user-entered dates against a fixed, ordered set of formats."""

    def __init__(self, formats: DateFormats = DEFAULT_FORMATS):
        self.formats = formats

    @property
    def display_format(self) -> str:
        return self.formats.display_format

    def parse(self, text: str) -> datetime | None:
        """
        Parse text into a datetime.

        Returns None when no format matches; callers keep the raw text.
        """
        text = text.strip()
        if not text:
            return None

        for fmt in self.formats.datetime_formats:
            parsed = _try_parse(text, fmt)
            if parsed is not None:
                return parsed

        for fmt in self.formats.date_formats:
            parsed = _try_parse(text, fmt)
            if parsed is not None:
                return datetime.combine(parsed.date(), datetime.min.time())

        return None

    def parse_or_raw(self, text: str) -> datetime | str:
        """Parsed value when recognised, else the stripped input text."""
        parsed = self.parse(text)
        return parsed if parsed is not None else text.strip()
