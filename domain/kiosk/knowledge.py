# domain/kiosk/knowledge.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from domain.kiosk.knowledge_data import MENU_KNOWLEDGE

# size suffixes as typed in the sheet: "22ออนซ์", "22 ออนซ์-G", "22oz."
_SIZE_SUFFIX_RES = (
    re.compile(r"22\s*ออนซ์\s*-\s*G"),
    re.compile(r"22\s*ออนซ์"),
    re.compile(r"22\s*oz\.?", re.IGNORECASE),
)
_PARENS_RE = re.compile(r"\(.*?\)")
_STARRED_RE = re.compile(r"\*.*?\*")


@dataclass(frozen=True)
class KnowledgeEntry:
    main_flavor: str
    profile: Tuple[str, ...]
    base: str

    def has_profile(self, tag: str) -> bool:
        return tag in self.profile

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "KnowledgeEntry":
        return cls(
            main_flavor=str(d.get("main_flavor") or ""),
            profile=tuple(d.get("profile") or ()),
            base=str(d.get("base") or ""),
        )


def clean_product_name(raw: str) -> str:
    """
    "ชานมเย็น (ร้อน) *NEW* 22ออนซ์" -> "ชานมเย็น"
    Drops annotations and size suffixes; hyphens become spaces.

    Suffixes are stripped before hyphens are replaced so "22 ออนซ์-G" goes
    as a whole, and "22 oz" is matched in any case and spacing. The older
    kiosk replaced hyphens first and only knew "22oz.".
    """
    s = _PARENS_RE.sub("", raw or "")
    s = _STARRED_RE.sub("", s)
    for rx in _SIZE_SUFFIX_RES:
        s = rx.sub("", s)
    s = s.replace("-", " ")
    return s.strip()


class KnowledgeBase:
    """
    Read-only name -> KnowledgeEntry table with a forgiving lookup.

    Match order, first hit wins:
      1. exact raw name
      2. exact cleaned name
      3. cleaned name, case-insensitive, against trimmed keys
      4. cleaned name is a prefix of a key
      5. a key is a prefix of the cleaned name
    Prefix rules walk the table in insertion order, so a short key can
    shadow a longer unrelated one; there is no tie-break beyond that.
    """

    def __init__(self, table: Mapping[str, Any]):
        self._entries: Dict[str, KnowledgeEntry] = {
            k: v if isinstance(v, KnowledgeEntry) else KnowledgeEntry.from_dict(v)
            for k, v in table.items()
        }
        self._folded = [(k.lower().strip(), k) for k in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, raw_name: Optional[str]) -> Optional[KnowledgeEntry]:
        if not raw_name:
            return None

        if raw_name in self._entries:
            return self._entries[raw_name]

        cleaned = clean_product_name(raw_name)
        if cleaned in self._entries:
            return self._entries[cleaned]

        lowered = cleaned.lower()
        if not lowered:
            return None

        for folded, key in self._folded:
            if folded == lowered:
                return self._entries[key]
        for folded, key in self._folded:
            if folded.startswith(lowered):
                return self._entries[key]
        for folded, key in self._folded:
            if folded and lowered.startswith(folded):
                return self._entries[key]
        return None


_default_kb = KnowledgeBase(MENU_KNOWLEDGE)


def default_knowledge_base() -> KnowledgeBase:
    return _default_kb


def lookup_knowledge(raw_name: Optional[str]) -> Optional[KnowledgeEntry]:
    return _default_kb.lookup(raw_name)
