"""Registro de usuarios (sin auth)."""
from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_db
from app.api.schemas.user import UserOut, UserRegisterIn
from app.core.config import settings
from app.services import user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
    response_model_exclude_none=True,
    summary="Registrar usuario",
)
async def register(payload: UserRegisterIn, response: Response, db=Depends(get_db)):
    doc = await user_service.register_user(db, payload.model_dump(exclude_unset=True))
    out = UserOut.from_doc(doc)
    response.headers["Location"] = settings.location_for("users", out.id)
    return out
