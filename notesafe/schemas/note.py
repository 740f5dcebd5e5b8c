from pydantic import BaseModel, BeforeValidator
from typing import Annotated, Any, Optional

from notesafe.core.sanitize import sanitize_input, sanitize_note_input


# Single-argument wrappers: pydantic treats a second positional
# parameter as the ValidationInfo slot.
def _sanitize(value: Any) -> str:
    return sanitize_input(value)


def _sanitize_note(value: Any) -> str:
    return sanitize_note_input(value)


# Usage: field_name: SanitizedStr = Field(...)
SanitizedStr = Annotated[str, BeforeValidator(_sanitize)]

# Rejected values surface as a pydantic validation error (422 in FastAPI)
NoteStr = Annotated[str, BeforeValidator(_sanitize_note)]


class NoteCreate(BaseModel):
    note: NoteStr


class NoteUpdate(BaseModel):
    note: Optional[NoteStr] = None
