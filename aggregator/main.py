from fastapi import FastAPI, Depends
from fastapi.staticfiles import StaticFiles
from urllib.parse import quote
import httpx
import logging
import re

from .config import (
    COUNTRY_API_URL,
    EXCHANGE_API_URL,
    NEWS_API_URL,
    NEWS_MAX_RECORDS,
    NEWS_SORT,
    NEWS_TIMESPAN,
    RANDOM_USER_URL,
    STATIC_DIR,
)
from .errors import (
    ApiError,
    InvalidUpstreamResponse,
    UpstreamError,
    api_error_handler,
    bad_request,
    invalid_response,
    upstream_error,
)
from .logging_config import configure_logging
from .normalizers import (
    normalize_country,
    normalize_exchange,
    normalize_user,
    pick_country_match,
    select_news,
)
from .schemas import CountryFallback, envelope
from .upstream import fetch_json, get_client


CURRENCY_CODE = re.compile(r"[A-Z]{3}")
COUNTRY_UNAVAILABLE = "Country data is unavailable right now."

configure_logging()
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Country Profile Aggregator"
)
app.add_exception_handler(ApiError, api_error_handler)


@app.get("/health")
def health():
    return {"status": "healthy"}


@app.get("/api/random-user")
def random_user(client: httpx.Client = Depends(get_client)):
    try:
        payload = fetch_json(client, RANDOM_USER_URL)
    except UpstreamError as e:
        raise upstream_error(e, "Failed to fetch random user.")

    results = payload.get("results") if isinstance(payload, dict) else None
    user = results[0] if isinstance(results, list) and results else None
    if not user:
        raise invalid_response("Random User API returned unexpected data.")

    return envelope(normalize_user(user))


@app.get("/api/country/{country_name}")
def get_country(country_name: str, client: httpx.Client = Depends(get_client)):
    country_name = country_name.strip()
    if not country_name:
        raise bad_request("countryName is required.")

    # Upstream failures degrade to placeholder data so the page always renders.
    try:
        payload = fetch_json(client, f"{COUNTRY_API_URL}/{quote(country_name, safe='')}")
    except UpstreamError as e:
        logger.warning("Country lookup for %r failed, serving placeholder: %s", country_name, e.message)
        return envelope(CountryFallback(note=COUNTRY_UNAVAILABLE))

    country = pick_country_match(payload, country_name)
    return envelope(normalize_country(country))


@app.get("/api/exchange/{currency_code}")
def get_exchange(currency_code: str, client: httpx.Client = Depends(get_client)):
    currency_code = currency_code.strip().upper()
    if not CURRENCY_CODE.fullmatch(currency_code):
        raise bad_request("currencyCode must be a 3-letter code (e.g. EUR).")

    try:
        payload = fetch_json(client, f"{EXCHANGE_API_URL}/{quote(currency_code, safe='')}")
    except UpstreamError as e:
        raise upstream_error(e, "Failed to fetch exchange rates.")

    try:
        exchange = normalize_exchange(currency_code, payload)
    except InvalidUpstreamResponse as e:
        raise invalid_response(str(e))
    return envelope(exchange)


@app.get("/api/news/{country}")
def get_news(country: str, client: httpx.Client = Depends(get_client)):
    country = country.strip()
    if not country:
        raise bad_request("country is required.")

    params = {
        "mode": "artlist",
        "format": "json",
        "maxrecords": str(NEWS_MAX_RECORDS),
        "sort": NEWS_SORT,
        "timespan": NEWS_TIMESPAN,
        "query": country,
    }
    try:
        payload = fetch_json(client, NEWS_API_URL, params=params)
    except UpstreamError as e:
        raise upstream_error(e, "Failed to fetch news.")

    articles = payload.get("articles") if isinstance(payload, dict) else None
    if not isinstance(articles, list):
        articles = []

    return envelope(select_news(articles, country))


app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="public")
