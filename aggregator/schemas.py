from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class UserProfile(CamelModel):
    first_name: str
    last_name: str
    gender: str
    profile_picture_url: str | None = None
    age: int | None = None
    date_of_birth: str | None = None
    city: str
    country: str
    full_address: str


class Currency(CamelModel):
    code: str = "Unknown"
    name: str = "Unknown"


class CountryInfo(CamelModel):
    country_name: str = "Unknown"
    capital_city: str = "Unknown"
    languages: list[str] = Field(default_factory=list)
    currency: Currency = Field(default_factory=Currency)
    flag_url: str | None = None
    flag_emoji: str | None = None


class CountryFallback(CountryInfo):
    note: str


class Rate(CamelModel):
    code: str
    rate: float
    formatted: str


class ExchangeQuote(CamelModel):
    base_currency: str
    usd: Rate
    kzt: Rate


class NewsItem(CamelModel):
    title: str
    image_url: str | None = None
    description: str
    url: str | None = None


class ErrorDetail(BaseModel):
    code: str
    message: str


class SuccessEnvelope(BaseModel):
    ok: Literal[True] = True
    data: Any


class ErrorEnvelope(BaseModel):
    ok: Literal[False] = False
    error: ErrorDetail


def envelope(data) -> dict:
    if isinstance(data, CamelModel):
        data = data.to_json()
    elif isinstance(data, list):
        data = [item.to_json() if isinstance(item, CamelModel) else item for item in data]
    return SuccessEnvelope(data=data).model_dump()
