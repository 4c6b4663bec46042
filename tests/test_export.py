import json

import numpy as np
import pytest

from filtchain import FilterSpec, filter_pipeline, run_filtering
from filtchain.export_viz import build_filter_payload, export_filter_json
from filtchain.viz import frequency_response, plot_filter_response, plot_filtered_signal


def _request(n_samples=500):
    t = np.arange(n_samples) / 100.0
    return {
        "samples": np.sin(2 * np.pi * 3.0 * t).tolist(),
        "fs": 100.0,
        "filters": [
            {"name": "butter", "type": "low", "n": 4, "fc": 20.0},
            {"name": "none"},
            {"name": "notch", "b": 0.95, "fc": 25.0},
        ],
    }


def test_run_filtering_payload():
    payload = run_filtering(_request())
    assert payload["sample_rate"] == 100.0
    assert payload["sample_count"] == 500
    assert payload["is_empty"] is False
    assert len(payload["filtered"]) == 500
    assert [f["name"] for f in payload["filters"]] == ["butter", "none", "notch"]
    butter, passthrough, notch = payload["filters"]
    assert butter["b"] is None and butter["type"] == "lowpass" and butter["n"] == 4
    assert notch["type"] is None and notch["b"] == 0.95 and notch["n"] == 4
    assert "response" not in passthrough
    assert len(notch["response"]["freqs_hz"]) == 400
    json.dumps(payload)


def test_run_filtering_short_signal():
    payload = run_filtering(_request(n_samples=10))
    assert payload["is_empty"] is True
    assert payload["filtered"] == []
    assert payload["filters"][0]["n"] == 4


def test_export_round_trip(tmp_path):
    x = np.random.default_rng(0).normal(size=300)
    filtered, results = filter_pipeline(x, 100.0, [FilterSpec.notch(25.0, 0.9)])
    payload = build_filter_payload(x, filtered, 100.0, results)
    path = tmp_path / "out" / "filters.json"
    export_filter_json(payload, path)
    loaded = json.loads(path.read_text())
    np.testing.assert_allclose(loaded["filters"][0]["coef_num"], results[0].coef_num)
    # notch nulls come out as null, not -Infinity
    assert all(v is None or np.isfinite(v) for v in loaded["filters"][0]["response"]["magnitude_db"])


def test_frequency_response_unity_dc_for_notch():
    _, results = filter_pipeline(np.zeros(100), 100.0, [FilterSpec.notch(10.0, 0.95)])
    freqs, magnitude_db, _ = frequency_response(results[0].coef_num, results[0].coef_den, 100.0)
    assert len(freqs) == 400
    assert freqs[0] == 0.0
    assert magnitude_db[0] == pytest.approx(0.0, abs=1e-9)


def test_plots_saved_to_file(tmp_path):
    x = np.random.default_rng(0).normal(size=300)
    filtered, results = filter_pipeline(x, 100.0, [FilterSpec.butter(2, 10.0, "low")])
    response_png = tmp_path / "response.png"
    trace_png = tmp_path / "trace.png"
    plot_filter_response(results[0].coef_num, results[0].coef_den, 100.0, "butter lowpass", output_path=response_png)
    plot_filtered_signal(x, filtered, 100.0, output_path=trace_png)
    assert response_png.stat().st_size > 0
    assert trace_png.stat().st_size > 0
