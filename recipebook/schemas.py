from typing import Optional
from pydantic import BaseModel, Field


class RecipeBase(BaseModel):
    title: Optional[str] = Field(
        default=None, json_schema_extra={"example": "Simple Pancakes"}
    )
    ingredients: Optional[str] = Field(
        default=None,
        json_schema_extra={"example": "flour, milk, egg"},
    )
    method: Optional[str] = Field(
        default=None,
        json_schema_extra={"example": "Mix, rest, cook on a skillet until golden"},
    )


class RecipeCreate(RecipeBase):
    pass
