"""
Scenario JSON loading and saving.

Schema:
{
  "name": "Solar System",
  "star": {"name": "Sun", "mass": 1.989e30, "radius": 20, "color": "#FFD700"},   # optional
  "bodies": [
    {
      "name": "Earth",
      "mass": 5.972e24,            # optional
      "radius": 6,                 # optional, display radius
      "color": "#6B93D6",          # optional
      "elements": {
        "semi_major_axis": 150.0,
        "eccentricity": 0.017,
        "mean_anomaly_at_epoch": 3.14159,
        "orbital_period": 365.0
      }
    }
  ]
}
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from orrery.objects.body import Body, CentralBody
from orrery.physics.orbit import OrbitalElements
from orrery.simulation.scenario import Scenario


class ScenarioLoadError(ValueError):
    """Raised when a scenario document is unreadable or malformed."""


def _body_from_dict(b: Dict[str, Any]) -> Body:
    el = b["elements"]
    elements = OrbitalElements(
        semi_major_axis=float(el["semi_major_axis"]),
        eccentricity=float(el["eccentricity"]),
        mean_anomaly_at_epoch=float(el["mean_anomaly_at_epoch"]),
        orbital_period=float(el["orbital_period"]),
    )
    kwargs: Dict[str, Any] = {}
    for key in ("mass", "radius"):
        if key in b:
            kwargs[key] = float(b[key])
    if "color" in b:
        kwargs["color"] = str(b["color"])
    return Body(name=str(b["name"]), elements=elements, **kwargs)


def scenario_from_dict(data: Dict[str, Any]) -> Scenario:
    if not isinstance(data, dict):
        raise ScenarioLoadError("Scenario document must be a JSON object.")

    star_data = data.get("star")
    if star_data is None:
        star_data = {}
    if not isinstance(star_data, dict):
        raise ScenarioLoadError(f"Invalid star entry: expected an object, got {type(star_data).__name__}")
    try:
        star = CentralBody(**{k: star_data[k] for k in ("name", "mass", "radius", "color") if k in star_data})
    except (TypeError, ValueError) as exc:
        raise ScenarioLoadError(f"Invalid star entry: {exc}") from exc

    scenario = Scenario(name=str(data.get("name", "Untitled")), star=star)
    for i, b in enumerate(data.get("bodies", [])):
        try:
            body = _body_from_dict(b)
        except (KeyError, TypeError, ValueError) as exc:
            label = b.get("name", f"#{i}") if isinstance(b, dict) else f"#{i}"
            raise ScenarioLoadError(f"Invalid body entry {label}: {exc}") from exc
        try:
            scenario.add_body(body)
        except ValueError as exc:
            raise ScenarioLoadError(str(exc)) from exc
    return scenario


def scenario_to_dict(scenario: Scenario) -> Dict[str, Any]:
    star = scenario.star
    return {
        "name": scenario.name,
        "star": {"name": star.name, "mass": star.mass, "radius": star.radius, "color": star.color},
        "bodies": [
            {
                "name": b.name,
                "mass": b.mass,
                "radius": b.radius,
                "color": b.color,
                "elements": {
                    "semi_major_axis": b.elements.semi_major_axis,
                    "eccentricity": b.elements.eccentricity,
                    "mean_anomaly_at_epoch": b.elements.mean_anomaly_at_epoch,
                    "orbital_period": b.elements.orbital_period,
                },
            }
            for b in scenario.body_list()
        ],
    }


def load_scenario(path: str) -> Scenario:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ScenarioLoadError(f"Could not read scenario '{path}': {exc}") from exc
    return scenario_from_dict(data)


def save_scenario(scenario: Scenario, out_path: str = "out/scenario.json") -> str:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(scenario_to_dict(scenario), f, indent=2)
    return out_path
