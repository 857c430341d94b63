"""
Normalized text value object.

Converts untrusted text into a value that is:
- NFKC-normalized (full-width/half-width variants, ligatures and other
  compatibility characters collapse to their canonical forms)
- stripped of leading/trailing Unicode ``White_Space`` (information
  separators such as U+001F are kept)
- non-empty, unless the field is optional and absent
- within an optional inclusive length range, counted in grapheme
  clusters (user-perceived characters)

Normalization runs before stripping: decomposing a compatibility
character may itself produce whitespace at the edges.
"""

import unicodedata
from dataclasses import dataclass

import regex

from userhub.domain.errors import InternalServerError, UnprocessableContentError

_GRAPHEME = regex.compile(r"\X")
_EDGE_WHITE_SPACE = regex.compile(r"\A\p{White_Space}+|\p{White_Space}+\Z")


def grapheme_length(text: str) -> int:
    """Count extended grapheme clusters in ``text``."""
    return sum(1 for _ in _GRAPHEME.finditer(text))


def normalize(raw: str) -> str:
    """NFKC-normalize ``raw`` and strip edge ``White_Space``."""
    return _EDGE_WHITE_SPACE.sub("", unicodedata.normalize("NFKC", raw))


@dataclass(frozen=True, slots=True)
class NormalizedText:
    """
    Immutable, already-validated text.

    Build instances with ``NormalizedText.parse``, the only constructor
    that applies field rules. Direct construction accepts only text that is
    already normalized and non-empty.

    Attributes:
        value: Normalized, stripped text

    Raises:
        InternalServerError: If constructed directly with raw text
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InternalServerError("NormalizedText value must be non-empty text")
        if normalize(self.value) != self.value:
            raise InternalServerError("NormalizedText value is not normalized")

    @classmethod
    def parse(
        cls,
        raw: str,
        *,
        required: bool,
        label: str,
        min_len: int | None = None,
        max_len: int | None = None,
    ) -> "NormalizedText | None":
        """
        Normalize and validate raw input.

        Args:
            raw: Untrusted input text
            required: If True, empty input is an error; otherwise it yields None
            label: Field name used in error messages
            min_len: Minimum length in grapheme clusters (inclusive)
            max_len: Maximum length in grapheme clusters (inclusive)

        Returns:
            NormalizedText, or None when the input is empty and not required

        Raises:
            UnprocessableContentError: If the value is missing or out of range
        """
        normalized = normalize(raw)

        if not normalized:
            if required:
                raise UnprocessableContentError(f"{label} is required")
            return None

        length = grapheme_length(normalized)

        if min_len is not None and length < min_len:
            raise UnprocessableContentError(
                f"{label} must be at least {min_len} characters"
            )
        if max_len is not None and length > max_len:
            raise UnprocessableContentError(
                f"{label} must be at most {max_len} characters"
            )

        return cls(normalized)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return grapheme_length(self.value)
