import pytest
from fastapi import Body, FastAPI
from fastapi.testclient import TestClient

from notesafe.api.errors import register_error_handlers
from notesafe.core.sanitize import sanitize_note_input
from notesafe.schemas.note import NoteCreate, NoteUpdate


def create_test_app() -> FastAPI:
    """Minimal app wiring the sanitizer into a request path."""
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/notes")
    def create_note(text: str = Body(..., embed=True)):
        return {"note": sanitize_note_input(text)}

    @app.post("/notes/model")
    def create_note_model(payload: NoteCreate):
        return payload

    @app.patch("/notes/model")
    def update_note_model(payload: NoteUpdate):
        return payload

    return app


@pytest.fixture
def client():
    with TestClient(create_test_app()) as c:
        yield c
