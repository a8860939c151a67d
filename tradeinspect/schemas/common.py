from pydantic import AfterValidator, BaseModel, HttpUrl, StringConstraints
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Validated as an http(s) URL, stored as the plain string
UrlStr = Annotated[HttpUrl, AfterValidator(str)]


class CamelModel(BaseModel):
    """Base for resources exchanged with camelCase JSON keys"""

    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class DeletedResponse(BaseModel):
    message: str
    id: Optional[str] = None
