"""Skill normalization and matching"""
import re
from typing import Dict, Iterable, List, Optional, Protocol

_DISALLOWED = re.compile(r"[^a-z0-9+#\s]")


class SkillSynonymResolver(Protocol):
    """Maps a raw skill onto its canonical spelling before normalization"""

    def resolve(self, skill: str) -> str:
        ...


class IdentityResolver:
    """Resolver that leaves every skill untouched"""

    def resolve(self, skill: str) -> str:
        return skill


class SynonymTableResolver:
    """Lookup-table resolver, e.g. {"js": "JavaScript", "k8s": "Kubernetes"}.

    Keys are compared after normalization, so "JS" and "js " hit the same entry.
    """

    def __init__(self, table: Optional[Dict[str, str]] = None):
        self.table = {normalize_skill(alias): canonical for alias, canonical in (table or {}).items()}

    def resolve(self, skill: str) -> str:
        return self.table.get(normalize_skill(skill), skill)

    def extend(self, table: Dict[str, str]) -> "SynonymTableResolver":
        merged = SynonymTableResolver()
        merged.table = {**self.table, **{normalize_skill(k): v for k, v in table.items()}}
        return merged


def normalize_skill(skill: str) -> str:
    """Lower-case, trim and strip everything except letters, digits, '+', '#' and spaces"""
    if skill is None:
        return ""
    return _DISALLOWED.sub("", str(skill).lower().strip())


def normalize_skills(raw_skills: Optional[Iterable[str]], resolver: Optional[SkillSynonymResolver] = None) -> List[str]:
    """Normalize a list of skills, dropping entries that end up empty"""
    if not raw_skills:
        return []
    normalized = []
    for skill in raw_skills:
        if resolver is not None:
            skill = resolver.resolve(skill)
        token = normalize_skill(skill)
        if token:
            normalized.append(token)
    return normalized


def skills_match(a: str, b: str) -> bool:
    """Normalized skills match when either contains the other ("js" ~ "javascript")"""
    return a in b or b in a


def matches_any(skill: str, pool: Iterable[str]) -> bool:
    return any(skills_match(skill, other) for other in pool)
