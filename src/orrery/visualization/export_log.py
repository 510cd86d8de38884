from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from orrery.simulation.engine import SimulationLog
from orrery.simulation.scenario import Scenario


def export_log_to_json(log: SimulationLog, out_path: str = "out/orbitlog.json") -> str:
    """
    Export minimal playback data:
      {
        "body_positions": {
          "Earth": [{"t":0.0,"r":[x,y],"nu":3.14}, ...],
          ...
        },
        "events": [...]
      }
    """
    data: Dict[str, Any] = {"body_positions": {}, "events": list(log.events)}

    for name, samples in log.body_positions.items():
        anomalies = log.true_anomalies.get(name, [])
        rows = []
        for i, (t, r) in enumerate(samples):
            row: Dict[str, Any] = {"t": t, "r": [r[0], r[1]]}
            if i < len(anomalies):
                row["nu"] = anomalies[i][1]
            rows.append(row)
        data["body_positions"][name] = rows

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path


def export_playback_bundle(
    scenario: Scenario,
    log: SimulationLog,
    out_path: str = "out/playback_bundle.json",
) -> str:
    """
    Export a bundle for a canvas viewer:
      - times: global time vector
      - bodies: screen positions over time plus display attributes
      - star: display attributes and canvas position

    JSON shape:
    {
      "times": [0,1,2,...],
      "canvas": {"width": 800, "height": 800},
      "star": {"name": "Sun", "radius": 20, "color": "#FFD700", "xy": [400, 400]},
      "bodies": {"Earth": {"radius": 6, "color": "#6B93D6", "xy": [[x,y], ...]}, ...}
    }
    """
    names = sorted(log.body_positions.keys())
    if not names:
        raise ValueError("No body positions found in log.")

    times: List[float] = log.times()
    star = scenario.star
    sx, sy = scenario.star_screen_position

    data: Dict[str, Any] = {
        "times": times,
        "canvas": {"width": scenario.canvas_width, "height": scenario.canvas_height},
        "star": {"name": star.name, "radius": star.radius, "color": star.color, "xy": [sx, sy]},
        "bodies": {},
    }

    for name in names:
        samples = log.body_positions[name]
        if len(samples) != len(times):
            raise ValueError(f"{name} samples length mismatch.")
        body = scenario.bodies[name]
        data["bodies"][name] = {
            "radius": body.radius,
            "color": body.color,
            "xy": [list(scenario.to_screen(r)) for (_t, r) in samples],
        }

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path
