from typing import Annotated, Generic, List, TypeVar
from pydantic import AfterValidator, BaseModel, HttpUrl, TypeAdapter, ValidationError

T = TypeVar("T")

_http_url = TypeAdapter(HttpUrl)


def _validate_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("must be a valid http(s) URL")
    return value


# Plain string on the model, validated as an absolute http(s) URL
UrlStr = Annotated[str, AfterValidator(_validate_url)]


class PageMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class Page(BaseModel, Generic[T]):
    data: List[T]
    meta: PageMeta


class Envelope(BaseModel, Generic[T]):
    data: T


class ErrorResponse(BaseModel):
    error: str
    code: str
