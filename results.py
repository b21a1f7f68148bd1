from datetime import date
from html import escape
from typing import Optional

import numpy as np

CATEGORIES = ("COVID-19", "Normal", "Viral Pneumonia")
BAR_COLORS = ("#ef4444", "#22c55e", "#eab308")

COVID_HINT = (
    "COVID-19 indicators in chest X-rays include ground-glass opacities, consolidation, "
    "and bilateral peripheral distribution."
)
DISCLAIMER = (
    "This analysis is provided for informational purposes only and should not be considered "
    "a medical diagnosis. Please consult with a healthcare professional for proper medical advice."
)


def predicted_index(vector) -> int:
    # np.argmax returns the first occurrence on ties
    return int(np.argmax(np.asarray(vector, dtype=float)))


def predicted_category(vector) -> str:
    return CATEGORIES[predicted_index(vector)]


def format_percentages(vector):
    return [f"{p:.2f}" for p in np.asarray(vector, dtype=float) * 100.0]


def alert_variant(index: int) -> str:
    if index == 0:
        return "destructive"
    if index == 1:
        return "default"
    return "warning"


def download_filename(day: Optional[date] = None) -> str:
    day = day or date.today()
    return f"xray-analysis-{day.isoformat()}.jpg"


def summarize(vector):
    index = predicted_index(vector)
    return {
        "predicted_index": index,
        "predicted": CATEGORIES[index],
        "percentages": format_percentages(vector),
        "alert_variant": alert_variant(index),
    }


def render_results(vector, image_src: str, download_url: str = "/download") -> str:
    """Build the results card: preview, predicted class and one bar per category."""
    summary = summarize(vector)
    index = summary["predicted_index"]

    rows = []
    for i, (category, pct) in enumerate(zip(CATEGORIES, summary["percentages"])):
        weight = "bold" if i == index else "muted"
        hint = f' <span class="hint" title="{escape(COVID_HINT)}">&#9432;</span>' if i == 0 else ""
        rows.append(
            f'<div class="bar-row">'
            f'<div class="bar-label"><span class="{weight}">{escape(category)}{hint}</span>'
            f'<span class="{weight}">{pct}%</span></div>'
            f'<div class="bar-track"><div class="bar-fill" '
            f'style="width: {pct}%; background: {BAR_COLORS[i]};"></div></div>'
            f"</div>"
        )

    image_html = ""
    if image_src:
        image_html = (
            f'<img class="result-img" src="{escape(image_src)}" alt="X-ray" />'
            f'<a class="btn outline" href="{escape(download_url)}" '
            f'download="{download_filename()}">Download Image</a>'
        )

    return (
        '<div class="results">'
        f'<div class="result-image">{image_html}</div>'
        '<div class="result-body">'
        f'<div class="alert {summary["alert_variant"]}">Predicted: {escape(summary["predicted"])}</div>'
        "<h3>Probability Distribution</h3>"
        f'{"".join(rows)}'
        f'<div class="note"><strong>Important Note:</strong><p>{escape(DISCLAIMER)}</p></div>'
        "</div>"
        "</div>"
    )
