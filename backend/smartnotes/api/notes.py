import logging

from fastapi import APIRouter, Depends, Query, Response

from smartnotes.config import data_dir
from smartnotes.errors import NoteNotFound
from smartnotes.models.notes import NoteCreate, NoteOut, NoteUpdate
from smartnotes.storage.notes_store import NotesStore
from smartnotes.utils.jwt_auth import get_current_user
from smartnotes.validation.fields import validate_uuid
from smartnotes.validation.processor import process_create, process_update

router = APIRouter(prefix="/notes", tags=["notes"])
logger = logging.getLogger(__name__)

DATA_DIR = data_dir()
store = NotesStore(DATA_DIR)


@router.post("", response_model=NoteOut, status_code=201)
def create_note(payload: NoteCreate, user_id: str = Depends(get_current_user)) -> NoteOut:
    title, content = process_create(payload.title, payload.content)
    note = store.create_note(user_id=user_id, title=title, content=content)

    logger.info(
        "note created id=%s user=%s title_derived=%s",
        note.id, user_id, payload.title is None or not payload.title.strip(),
    )
    return NoteOut(**note.to_dict())


@router.get("", response_model=list[NoteOut])
def list_notes(user_id: str = Depends(get_current_user)) -> list[NoteOut]:
    notes = store.list_notes(user_id=user_id)
    return [NoteOut(**n.to_dict()) for n in notes]


# declared before /{note_id} so "search" is not parsed as an id
@router.get("/search", response_model=list[NoteOut])
def search_notes(
    q: str = Query(min_length=1, max_length=200),
    user_id: str = Depends(get_current_user),
) -> list[NoteOut]:
    notes = store.search_notes(user_id=user_id, query=q)
    return [NoteOut(**n.to_dict()) for n in notes]


@router.get("/{note_id}", response_model=NoteOut)
def get_note(note_id: str, user_id: str = Depends(get_current_user)) -> NoteOut:
    nid = validate_uuid(note_id)
    note = store.get_note(user_id=user_id, note_id=nid)
    if note is None:
        raise NoteNotFound(note_id=str(nid))
    return NoteOut(**note.to_dict())


@router.patch("/{note_id}", response_model=NoteOut)
@router.put("/{note_id}", response_model=NoteOut)
def update_note(note_id: str, payload: NoteUpdate, user_id: str = Depends(get_current_user)) -> NoteOut:
    nid = validate_uuid(note_id)

    # no leak: a note of another user looks exactly like a missing one
    existing = store.get_note(user_id=user_id, note_id=nid)
    if existing is None:
        raise NoteNotFound(note_id=str(nid))

    changes = process_update(payload.title, payload.content)
    if changes.is_empty():
        return NoteOut(**existing.to_dict())

    updated = store.update_note(user_id=user_id, note_id=nid, title=changes.title, content=changes.content)
    if updated is None:
        raise NoteNotFound(note_id=str(nid))

    logger.info("note updated id=%s user=%s version=%s", nid, user_id, updated.version)
    return NoteOut(**updated.to_dict())


@router.delete("/{note_id}", status_code=204)
def delete_note(note_id: str, user_id: str = Depends(get_current_user)) -> Response:
    nid = validate_uuid(note_id)
    if not store.delete_note(user_id=user_id, note_id=nid):
        raise NoteNotFound(note_id=str(nid))

    logger.info("note deleted id=%s user=%s", nid, user_id)
    return Response(status_code=204)
