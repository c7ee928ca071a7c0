"""
Pydantic model for user records.

A single ``Record`` model is used for request bodies, responses and
the storage port.  ``name`` and ``email`` are declared as plain
strings on purpose: their content rules (non-blank name, well-formed
email) belong to ``RecordService`` so that a rejection is reported as
a business validation failure rather than a schema error.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Record(BaseModel):
    """A user record: identifier, name and email.

    ``id`` is ``None`` for a record that has not been persisted yet.
    Clients may send an ``id`` in request bodies; it is ignored on
    create and overridden by the path parameter on update.
    """

    id: Optional[int] = Field(None, description="Identifier assigned by storage", examples=[1])
    name: str = Field(..., description="Display name", examples=["João"])
    email: str = Field(..., description="Email address, unique at creation", examples=["joao@example.com"])

    model_config = {
        "from_attributes": True,
    }
