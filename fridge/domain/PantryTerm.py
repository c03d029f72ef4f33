"""PantryTerm domain entity: an owned ingredient in the pantry (source) vocabulary."""
from typing import Any, Dict


class PantryTerm:
    """A pantry ingredient plus its best-effort translation.

    ``target_term`` is never empty: when translation fails it holds the
    normalized source term itself and ``resolved`` stays False until the user
    supplies an override.
    """

    def __init__(self, name: str, target_term: str = "", resolved: bool = False):
        self.name = name
        self.target_term = target_term or name
        self.resolved = resolved

    def apply_override(self, target_term: str):
        '''Re-resolves the term with a manual translation.'''
        if target_term:
            self.target_term = target_term
            self.resolved = True

    def set_resolution(self, target_term: str, resolved: bool):
        self.target_term = target_term or self.name
        self.resolved = resolved

    def __eq__(self, other) -> bool:
        if not isinstance(other, PantryTerm):
            return NotImplemented
        return (self.name, self.target_term, self.resolved) == (other.name, other.target_term, other.resolved)

    def __str__(self) -> str:
        flag = "" if self.resolved else " (untranslated)"
        return f"{self.name} -> {self.target_term}{flag}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]):
        '''Creates a PantryTerm from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return PantryTerm(
            name=str(d.get("name", "")),
            target_term=str(d.get("target_term", "") or ""),
            resolved=bool(d.get("resolved", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "target_term": self.target_term,
            "resolved": self.resolved,
        }
