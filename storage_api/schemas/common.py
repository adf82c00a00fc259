# storage_api/schemas/common.py
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


# Base configuration for reading entity objects
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Wrapper used by every JSON response, success or failure
class Envelope(BaseModel):
    message: str
    data: Optional[Any] = None
    error: bool = False
