from dotenv import load_dotenv
from pathlib import Path
import os

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STATIC_DIR = os.getenv("STATIC_DIR", str(Path(__file__).resolve().parent / "public"))

# seconds
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "12"))

RANDOM_USER_URL = os.getenv("RANDOM_USER_URL", "https://randomuser.me/api/")
COUNTRY_API_URL = os.getenv("COUNTRY_API_URL", "https://restcountries.com/v3.1/name")
EXCHANGE_API_URL = os.getenv("EXCHANGE_API_URL", "https://open.er-api.com/v6/latest")
NEWS_API_URL = os.getenv("NEWS_API_URL", "https://api.gdeltproject.org/api/v2/doc/doc")

NEWS_MAX_RECORDS = 100
NEWS_TIMESPAN = "30d"
NEWS_SORT = "datedesc"
NEWS_LIMIT = 5
