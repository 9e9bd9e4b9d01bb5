"""Base class for domain entities"""

import uuid
from sqlmodel import SQLModel


def generate_uuid() -> str:
    return str(uuid.uuid4())


class BaseModel(SQLModel):
    """
    Common base for plot sales domain entities

    Entities here are plain (non-table) SQLModel models: the stored
    representation is owned by the persistence collaborator.
    """

    pass
