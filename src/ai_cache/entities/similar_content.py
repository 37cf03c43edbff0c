"""Similar content domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SimilarContentEntity:
    """A cached payload whose content digest resembles a target's.

    Attributes:
        content: The cached payload of the matching entry
        similarity: Digest similarity score (1.0 = identical digest)
    """

    content: Any
    similarity: float
