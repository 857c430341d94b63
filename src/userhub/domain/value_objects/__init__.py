"""Value objects built from untrusted input."""

from userhub.domain.value_objects.birth_date import BirthDate
from userhub.domain.value_objects.identifier import Identifier, UserId
from userhub.domain.value_objects.normalized_text import NormalizedText

__all__ = [
    "BirthDate",
    "Identifier",
    "NormalizedText",
    "UserId",
]
