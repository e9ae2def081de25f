from dotenv import load_dotenv
from pathlib import Path
import os

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FORM_PATH = Path(__file__).resolve().parent / "static" / "index.html"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
