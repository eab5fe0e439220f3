"""Endpoints para `tags` del usuario autenticado."""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_current_user, get_db
from app.api.schemas.tag import TagIn, TagOut
from app.core.config import settings
from app.services import tag_service


router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get("", response_model=List[TagOut], summary="Listar tags")
async def list_tags(user=Depends(get_current_user), db=Depends(get_db)):
    return [TagOut.from_doc(d) for d in await tag_service.list_tags(db, user["_id"])]


@router.get("/{tag_id}", response_model=TagOut, summary="Obtener tag")
async def get_tag(tag_id: str, user=Depends(get_current_user), db=Depends(get_db)):
    return TagOut.from_doc(await tag_service.get_tag(db, user["_id"], tag_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TagOut, summary="Crear tag")
async def create_tag(payload: TagIn, response: Response, user=Depends(get_current_user), db=Depends(get_db)):
    out = TagOut.from_doc(await tag_service.create_tag(db, user["_id"], payload.model_dump()))
    response.headers["Location"] = settings.location_for("tags", out.id)
    return out


@router.put("/{tag_id}", response_model=TagOut, summary="Renombrar tag")
async def update_tag(tag_id: str, payload: TagIn, user=Depends(get_current_user), db=Depends(get_db)):
    return TagOut.from_doc(await tag_service.update_tag(db, user["_id"], tag_id, payload.model_dump()))


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Borrar tag")
async def delete_tag(tag_id: str, user=Depends(get_current_user), db=Depends(get_db)):
    await tag_service.delete_tag(db, user["_id"], tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
