"""
Endpoints para `notes`: CRUD + búsqueda, siempre sobre las notas del usuario autenticado.
"""
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status

from app.api.deps import get_current_user, get_db
from app.api.schemas.note import NoteIn, NoteOut
from app.core.config import settings
from app.services import note_service


router = APIRouter(prefix="/notes", tags=["Notes"])


def _fields(payload: Optional[NoteIn]) -> dict:
    # sin body se valida como `{}`
    return payload.model_dump(exclude_unset=True) if payload is not None else {}


@router.get(
    "",
    response_model=List[NoteOut],
    response_model_exclude_unset=True,
    summary="Listar notas",
    description="Lista notas del usuario con filtros opcionales (searchTerm, folderId, tagId).",
)
async def list_notes(
    searchTerm: Optional[str] = Query(default=None),
    folderId: Optional[str] = Query(default=None),
    tagId: Optional[str] = Query(default=None),
    user=Depends(get_current_user),
    db=Depends(get_db),
):
    items = await note_service.list_notes(
        db, user["_id"], search_term=searchTerm, folder_id=folderId, tag_id=tagId
    )
    return [NoteOut.from_doc(i) for i in items]


@router.get("/{note_id}", response_model=NoteOut, response_model_exclude_unset=True, summary="Obtener nota")
async def get_note(note_id: str, user=Depends(get_current_user), db=Depends(get_db)):
    return NoteOut.from_doc(await note_service.get_note(db, user["_id"], note_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteOut,
    response_model_exclude_unset=True,
    summary="Crear nota",
    description="Crea una nota del usuario; `folderId` y `tags` deben pertenecerle.",
)
async def create_note(
    response: Response,
    payload: Optional[NoteIn] = Body(default=None),
    user=Depends(get_current_user),
    db=Depends(get_db),
):
    doc = await note_service.create_note(db, user["_id"], _fields(payload))
    out = NoteOut.from_doc(doc)
    response.headers["Location"] = settings.location_for("notes", out.id)
    return out


@router.put("/{note_id}", response_model=NoteOut, response_model_exclude_unset=True, summary="Actualizar nota")
async def update_note(
    note_id: str,
    payload: Optional[NoteIn] = Body(default=None),
    user=Depends(get_current_user),
    db=Depends(get_db),
):
    doc = await note_service.update_note(db, user["_id"], note_id, _fields(payload))
    return NoteOut.from_doc(doc)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Borrar nota")
async def delete_note(note_id: str, user=Depends(get_current_user), db=Depends(get_db)):
    await note_service.delete_note(db, user["_id"], note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
