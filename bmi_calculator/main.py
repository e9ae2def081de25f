from fastapi import FastAPI, Form
from fastapi.responses import FileResponse, HTMLResponse
import logging

from .calculator import calculate_bmi, classify, validate
from .config import FORM_PATH, LOG_FORMAT, LOG_LEVEL
from .pages import error_page, result_page

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="BMI Calculator"
)


@app.get("/")
def home():
    return FileResponse(FORM_PATH, media_type="text/html")


@app.post("/calculate-bmi", response_class=HTMLResponse)
def calculate(weight: str | None = Form(None), height: str | None = Form(None)):
    w, h, errors = validate(weight, height)
    if errors:
        logger.info("Rejected BMI input: %s", "; ".join(errors))
        return HTMLResponse(error_page(errors), status_code=400)

    bmi = calculate_bmi(w, h)
    return HTMLResponse(result_page(w, h, bmi, classify(bmi)))
