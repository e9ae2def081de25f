"""Reshape third-party payloads into the fixed response schemas.

Upstream JSON is never trusted: every lookup goes through `_dig`, and any
missing or empty value is replaced with its sentinel ("Unknown" or None).
"""

import math
from typing import Any

from .config import NEWS_LIMIT
from .errors import InvalidUpstreamResponse
from .schemas import CountryInfo, Currency, ExchangeQuote, NewsItem, Rate, UserProfile

UNKNOWN = "Unknown"


def _dig(data: Any, *keys):
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _text(value, default=UNKNOWN):
    return str(value) if value else default


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def normalize_user(user: dict) -> UserProfile:
    age = _dig(user, "dob", "age")
    street = _dig(user, "location", "street")
    full_address = UNKNOWN
    if street:
        name = _dig(street, "name") or ""
        number = _dig(street, "number") or ""
        full_address = f"{name} {number}".strip() or UNKNOWN

    return UserProfile(
        first_name=_text(_dig(user, "name", "first")),
        last_name=_text(_dig(user, "name", "last")),
        gender=_text(_dig(user, "gender")),
        profile_picture_url=_text(_dig(user, "picture", "large") or _dig(user, "picture", "medium"), None),
        age=age if isinstance(age, int) and not isinstance(age, bool) else None,
        date_of_birth=_text(_dig(user, "dob", "date"), None),
        city=_text(_dig(user, "location", "city")),
        country=_text(_dig(user, "location", "country")),
        full_address=full_address,
    )


def pick_country_match(countries, requested_name: str) -> dict | None:
    """Prefer an exact (case-insensitive) common-name match, else the first candidate."""
    if not isinstance(countries, list) or not countries:
        return None

    target = str(requested_name or "").strip().lower()
    for country in countries:
        if str(_dig(country, "name", "common") or "").strip().lower() == target:
            return country
    return countries[0]


def normalize_country(country: dict | None) -> CountryInfo:
    capital = _dig(country, "capital")
    languages = _dig(country, "languages")
    currencies = _dig(country, "currencies")

    currency = Currency()
    if isinstance(currencies, dict):
        code = next(iter(currencies), None)
        currency = Currency(
            code=_text(code),
            name=_text(_dig(currencies.get(code), "name")),
        )

    return CountryInfo(
        country_name=_text(_dig(country, "name", "common")),
        capital_city=_text(capital[0] if isinstance(capital, list) and capital else None),
        languages=[str(lang) for lang in languages.values() if lang] if isinstance(languages, dict) else [],
        currency=currency,
        flag_url=_text(_dig(country, "flags", "png") or _dig(country, "flags", "svg"), None),
        flag_emoji=_text(_dig(country, "flag"), None),
    )


def _rate(base: str, target: str, value: float) -> Rate:
    return Rate(code=target, rate=value, formatted=f"1 {base} = {value:.2f} {target}")


def normalize_exchange(base: str, payload) -> ExchangeQuote:
    usd = _dig(payload, "rates", "USD")
    kzt = _dig(payload, "rates", "KZT")
    if not _is_number(usd) or not _is_number(kzt):
        raise InvalidUpstreamResponse("Exchange rate API returned unexpected data.")

    return ExchangeQuote(
        base_currency=base,
        usd=_rate(base, "USD", usd),
        kzt=_rate(base, "KZT", kzt),
    )


def normalize_article(article: dict) -> NewsItem:
    return NewsItem(
        title=_text(_dig(article, "title"), "Untitled"),
        image_url=_text(_dig(article, "socialimage"), None),
        description=_text(_dig(article, "description"), "No description available."),
        url=_text(_dig(article, "url"), None),
    )


def _is_english(article: dict) -> bool:
    language = _dig(article, "language")
    return not language or str(language).lower() == "english"


def select_news(articles: list, country: str, limit: int = NEWS_LIMIT) -> list[NewsItem]:
    """Headlines naming `country`, English first, at most `limit`, unique by url."""
    needle = country.lower()
    matching = [a for a in articles if needle in str(_dig(a, "title") or "").lower()]

    english = [item for item in map(normalize_article, filter(_is_english, matching)) if item.url]
    any_language = [item for item in map(normalize_article, matching) if item.url]

    selected: list[NewsItem] = []
    seen = set()
    for item in english + any_language:
        if len(selected) >= limit:
            break
        if item.url not in seen:
            selected.append(item)
            seen.add(item.url)

    return selected[:limit]
