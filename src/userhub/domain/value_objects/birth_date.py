"""
Birth date value object.

A birth date is accepted from user input only as an eight-digit
``YYYYMMDD`` string (after text normalization, so full-width digits are
accepted) and must not lie in the future. Values read back from storage
are rebuilt with ``BirthDate.from_date`` without re-validation.
"""

from dataclasses import dataclass
from datetime import date

from userhub.domain.errors import UnprocessableContentError
from userhub.domain.value_objects.normalized_text import NormalizedText

BIRTH_DATE_LABEL = "birth_date"
BIRTH_DATE_LENGTH = 8


def _today() -> date:
    """Current local calendar date."""
    return date.today()


def _parse_yyyymmdd(text: str) -> date | None:
    if len(text) != BIRTH_DATE_LENGTH or not (text.isascii() and text.isdigit()):
        return None
    try:
        return date(int(text[:4]), int(text[4:6]), int(text[6:]))
    except ValueError:
        return None


@dataclass(frozen=True, slots=True, order=True)
class BirthDate:
    """
    Calendar birth date that is not later than the day it was validated.

    Attributes:
        value: The calendar date
    """

    value: date

    @classmethod
    def parse(
        cls,
        raw: str,
        *,
        required: bool,
        today: date | None = None,
    ) -> "BirthDate | None":
        """
        Parse a ``YYYYMMDD`` birth date from user input.

        Args:
            raw: Untrusted input text
            required: If True, empty input is an error; otherwise it yields None
            today: Reference date (defaults to the local date)

        Returns:
            BirthDate, or None when the input is empty and not required

        Raises:
            UnprocessableContentError: If the input is malformed, not a real
                calendar date, or in the future
        """
        text = NormalizedText.parse(
            raw,
            required=required,
            label=BIRTH_DATE_LABEL,
            min_len=BIRTH_DATE_LENGTH,
            max_len=BIRTH_DATE_LENGTH,
        )
        if text is None:
            return None

        parsed = _parse_yyyymmdd(text.value)
        if parsed is None:
            raise UnprocessableContentError(
                f"{BIRTH_DATE_LABEL} must be in YYYYMMDD format"
            )

        if today is None:
            today = _today()
        if parsed > today:
            raise UnprocessableContentError(
                f"{BIRTH_DATE_LABEL} cannot be a future date"
            )

        return cls(parsed)

    @classmethod
    def from_date(cls, value: date) -> "BirthDate":
        """Wrap a trusted date (e.g. one read from storage)."""
        return cls(value)

    def age_in_years(self, today: date | None = None) -> int:
        """
        Age in completed years.

        A Feb 29 birthday is observed on Feb 28 in non-leap years.

        Args:
            today: Reference date (defaults to the local date)

        Returns:
            Non-negative age in whole years

        Raises:
            UnprocessableContentError: If the birth date is after ``today``
        """
        if today is None:
            today = _today()
        birth = self.value
        age = today.year - birth.year

        try:
            anniversary = birth.replace(year=today.year)
        except ValueError:
            # Feb 29 in a non-leap year
            anniversary = date(today.year, 2, 28)

        if today < anniversary:
            age -= 1

        if age < 0:
            raise UnprocessableContentError(f"{BIRTH_DATE_LABEL} value is invalid")
        return age

    def isoformat(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.value.strftime("%Y%m%d")
