from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


# ISO 639-2 (bibliographic and terminology codes where they differ)
BUILTIN_LANGUAGES: Mapping[str, str] = MappingProxyType({
    "jpn": "Japanese",
    "eng": "English",
    "spa": "Spanish",
    "fre": "French",
    "fra": "French",
    "ger": "German",
    "deu": "German",
    "ita": "Italian",
    "por": "Portuguese",
    "rus": "Russian",
    "chi": "Chinese",
    "zho": "Chinese",
    "kor": "Korean",
    "ara": "Arabic",
    "und": "Undetermined",
})


@dataclass(frozen=True)
class LanguageCatalog:
    """Immutable code -> display name lookup, passed into the use case."""

    names: Mapping[str, str] = field(default_factory=lambda: BUILTIN_LANGUAGES)

    @classmethod
    def with_overrides(cls, extra: Optional[Mapping[str, str]] = None) -> "LanguageCatalog":
        merged = dict(BUILTIN_LANGUAGES)
        merged.update(extra or {})
        return cls(names=MappingProxyType(merged))

    def resolve(self, code: str) -> Optional[str]:
        return self.names.get(code)

    def __contains__(self, code: str) -> bool:
        return code in self.names
