"""Endpoints para `folders` del usuario autenticado."""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_current_user, get_db
from app.api.schemas.folder import FolderIn, FolderOut
from app.core.config import settings
from app.services import folder_service


router = APIRouter(prefix="/folders", tags=["Folders"])


@router.get("", response_model=List[FolderOut], summary="Listar carpetas")
async def list_folders(user=Depends(get_current_user), db=Depends(get_db)):
    return [FolderOut.from_doc(d) for d in await folder_service.list_folders(db, user["_id"])]


@router.get("/{folder_id}", response_model=FolderOut, summary="Obtener carpeta")
async def get_folder(folder_id: str, user=Depends(get_current_user), db=Depends(get_db)):
    return FolderOut.from_doc(await folder_service.get_folder(db, user["_id"], folder_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FolderOut, summary="Crear carpeta")
async def create_folder(payload: FolderIn, response: Response, user=Depends(get_current_user), db=Depends(get_db)):
    out = FolderOut.from_doc(await folder_service.create_folder(db, user["_id"], payload.model_dump()))
    response.headers["Location"] = settings.location_for("folders", out.id)
    return out


@router.put("/{folder_id}", response_model=FolderOut, summary="Renombrar carpeta")
async def update_folder(folder_id: str, payload: FolderIn, user=Depends(get_current_user), db=Depends(get_db)):
    return FolderOut.from_doc(await folder_service.update_folder(db, user["_id"], folder_id, payload.model_dump()))


@router.delete(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Borrar carpeta",
    description="Borra la carpeta y quita la referencia `folderId` de las notas que la usaban.",
)
async def delete_folder(folder_id: str, user=Depends(get_current_user), db=Depends(get_db)):
    await folder_service.delete_folder(db, user["_id"], folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
