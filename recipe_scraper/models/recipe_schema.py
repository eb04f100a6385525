from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional


class StepRecord(BaseModel):
    """One instruction step; `image` is taken from the step's `url`."""

    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None


class CanonicalRecipe(BaseModel):
    """Normalized recipe record. Every field is optional; None means absent."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    images: Optional[List[str]] = None
    recipe_yield: Optional[List[str]] = None
    author: Optional[str] = None
    description: Optional[str] = None
    # ISO-8601 durations, passed through unparsed
    total_time: Optional[str] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    instructions: Optional[List[StepRecord]] = None
    ingredients: Optional[List[str]] = None
