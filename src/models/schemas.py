from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Optional

NonEmptyStr = Annotated[str, Field(min_length=1)]

class PostCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: NonEmptyStr
    body: NonEmptyStr
    tags: List[NonEmptyStr]

class PostUpdate(BaseModel):
    title: Optional[NonEmptyStr] = None
    body: Optional[NonEmptyStr] = None
    tags: Optional[List[NonEmptyStr]] = None
