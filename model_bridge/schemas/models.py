from typing import List, Literal
from pydantic import BaseModel

class ModelObject(BaseModel):
    id: str
    object: Literal["model"] = "model"
    owned_by: str

class ModelList(BaseModel):
    object: Literal["list"] = "list"
    data: List[ModelObject]

class ResolvedModel(BaseModel):
    requested: str
    model: str
    owned_by: str
