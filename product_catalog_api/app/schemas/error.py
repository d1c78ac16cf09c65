"""
Pydantic models describing the error envelope in the OpenAPI schema.

The envelope itself is built by ``core.errors``; these models only
document its shape for clients.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorDetail(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., examples=["NotFoundError"])
    message: str = Field(..., examples=["Product with ID 999 not found"])
    status_code: int = Field(..., examples=[404])
    timestamp: datetime


class ErrorEnvelope(BaseModel):
    error: ErrorDetail
