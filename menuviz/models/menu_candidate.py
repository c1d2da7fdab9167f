from typing import Any, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


# All-caps words up to this length are kept as acronyms ('BBQ', 'BLT')
ACRONYM_MAX_LENGTH = 3


def _title_word(word: str) -> str:
    if word.isupper() and len(word) > ACRONYM_MAX_LENGTH:
        return word.capitalize()
    return word[:1].upper() + word[1:]


def title_case(value: str) -> str:
    """
    Upper-case the first letter of every word.
    Shouted words are normalised ('GRILLED SALMON' -> 'Grilled Salmon'); short
    acronyms and inner capitals are kept ('BBQ ribs' -> 'BBQ Ribs', 'McRib' -> 'McRib').
    """
    return " ".join(_title_word(word) for word in value.split())


class MenuCandidate(BaseModel):
    """Unpersisted {name, description} pair produced by parsing"""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def _title_case_name(cls, value: str) -> str:
        return title_case(value)


def validate_candidates(raw_items: Iterable[Any]) -> List[MenuCandidate]:
    """Keep only objects with non-empty string name and description, in order."""
    candidates: List[MenuCandidate] = []
    for raw in raw_items:
        try:
            candidates.append(MenuCandidate.model_validate(raw))
        except ValidationError:
            continue
    return candidates
