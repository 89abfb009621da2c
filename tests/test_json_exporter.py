import json

from adapters.json_exporter import export_plan_json
from core.services.fallbacks import fallback_running_plan, fallback_yoga


def test_exports_camel_case_json(tmp_path, running_request):
    path = export_plan_json(plan=fallback_running_plan(running_request), output_path=tmp_path / "out" / "plan.json")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert path.parent.is_dir()
    assert data["weeks"][0]["weekNumber"] == 1
    assert data["weeks"][0]["sessions"][1] == {
        "day": "Tue",
        "type": "Easy Run",
        "distance": "3 km",
        "notes": "Comfortable pace",
    }


def test_export_is_utf8_with_trailing_newline(tmp_path, yoga_request):
    path = export_plan_json(plan=fallback_yoga(yoga_request), output_path=tmp_path / "yoga.json")

    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert json.loads(text)["poses"][0]["name"] == "Centering Breath"
