"""TranslationOverride: user-supplied (source term -> target term) pair, unique per source key."""
from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationOverride:
    source_term: str
    target_term: str

    def to_dict(self):
        return {"source_term": self.source_term, "target_term": self.target_term}
