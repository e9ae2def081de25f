import html


def _document(title: str, body: str) -> str:
    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{html.escape(title)}</title>
</head>
<body>
{body}
  <p><a href="/">Back to calculator</a></p>
</body>
</html>
"""


def result_page(weight: float, height: float, bmi: float, category: str) -> str:
    body = (
        "  <h1>Your BMI</h1>\n"
        f"  <p>Weight: {weight:g} kg, height: {height:g} m</p>\n"
        f"  <p class=\"bmi\">BMI: <strong>{bmi:.1f}</strong></p>\n"
        f"  <p class=\"category\">Category: <strong>{html.escape(category)}</strong></p>"
    )
    return _document("BMI result", body)


def error_page(errors: list[str]) -> str:
    items = "\n".join(f"    <li>{html.escape(e)}</li>" for e in errors)
    body = f"  <h1>Invalid input</h1>\n  <ul class=\"errors\">\n{items}\n  </ul>"
    return _document("BMI error", body)
