from datetime import date

from results import (
    CATEGORIES,
    alert_variant,
    download_filename,
    format_percentages,
    predicted_category,
    predicted_index,
    render_results,
    summarize,
)


def test_predicted_category_is_argmax():
    assert predicted_index([0.7, 0.2, 0.1]) == 0
    assert predicted_category([0.1, 0.8, 0.1]) == "Normal"
    assert predicted_category([0.1, 0.2, 0.7]) == "Viral Pneumonia"


def test_tie_resolves_to_first_index():
    assert predicted_index([0.5, 0.5, 0.0]) == 0
    assert predicted_category([0.5, 0.5, 0.0]) == "COVID-19"
    assert predicted_index([0.1, 0.45, 0.45]) == 1


def test_format_percentages_two_decimals():
    assert format_percentages([0.7, 0.2, 0.1]) == ["70.00", "20.00", "10.00"]
    assert format_percentages([0.12345, 1.0, 0.0]) == ["12.35", "100.00", "0.00"]


def test_vector_need_not_sum_to_one():
    assert format_percentages([0.9, 0.9, 0.9]) == ["90.00", "90.00", "90.00"]
    assert predicted_index([0.9, 0.9, 0.9]) == 0


def test_alert_variant_per_category():
    assert [alert_variant(i) for i in range(3)] == ["destructive", "default", "warning"]


def test_download_filename():
    assert download_filename(date(2024, 3, 9)) == "xray-analysis-2024-03-09.jpg"


def test_summarize():
    assert summarize([0.1, 0.2, 0.7]) == {
        "predicted_index": 2,
        "predicted": "Viral Pneumonia",
        "percentages": ["10.00", "20.00", "70.00"],
        "alert_variant": "warning",
    }


def test_render_results_contains_bars_and_prediction():
    html = render_results([0.7, 0.2, 0.1], "data:image/png;base64,AAAA")

    assert "Predicted: COVID-19" in html
    assert 'class="alert destructive"' in html
    for category, pct in zip(CATEGORIES, ["70.00", "20.00", "10.00"]):
        assert category in html
        assert f"width: {pct}%" in html
    assert 'src="data:image/png;base64,AAAA"' in html
    assert 'href="/download"' in html
    assert "Important Note" in html


def test_render_results_without_image():
    html = render_results([0.2, 0.5, 0.3], None)
    assert "Predicted: Normal" in html
    assert "<img" not in html


def test_download_filename_defaults_to_today():
    assert download_filename() == download_filename(date.today())
