"""Esquemas Pydantic para `folder`."""
from app.api.schemas.common import NamedIn, NamedOut


class FolderIn(NamedIn):
    pass


class FolderOut(NamedOut):
    pass
