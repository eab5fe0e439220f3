"""Esquemas Pydantic para `tag`."""
from app.api.schemas.common import NamedIn, NamedOut


class TagIn(NamedIn):
    pass


class TagOut(NamedOut):
    pass
