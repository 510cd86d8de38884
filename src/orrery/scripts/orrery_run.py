from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from orrery.core.constants import SPEED_STEPS
from orrery.io.scenario_loader import ScenarioLoadError, load_scenario
from orrery.simulation.clock import SimulationClock
from orrery.simulation.engine import OrbitalEngine
from orrery.simulation.scenario import solar_system_scenario
from orrery.simulation.systems.state_recorder import StateRecorderSystem
from orrery.visualization.export_log import export_log_to_json, export_playback_bundle
from orrery.visualization.plotly_viewer import render_frame, render_playback


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the orbit animation headlessly and write playback files.",
    )
    parser.add_argument("--scenario", type=str, default=None,
                        help="scenario JSON file (default: built-in solar system)")
    parser.add_argument("--t-start", dest="t_start", type=float, default=0.0)
    parser.add_argument("--t-end", dest="t_end", type=float, default=365.0,
                        help="end time in days (default: 365)")
    parser.add_argument("--dt", type=float, default=1.0, help="step in days (default: 1)")
    parser.add_argument("--speed", type=float, default=1.0,
                        help=f"speed multiplier, one of {', '.join(f'{s:g}' for s in SPEED_STEPS)}")
    parser.add_argument("--no-trails", dest="trails", action="store_false")
    parser.add_argument("--out-dir", dest="out_dir", type=str, default="out")
    parser.add_argument("--log-level", dest="log_level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        scenario = load_scenario(args.scenario) if args.scenario else solar_system_scenario()
        clock = SimulationClock(speed_multiplier=args.speed, trails_enabled=args.trails)
        engine = OrbitalEngine(scenario=scenario, clock=clock, systems=[StateRecorderSystem()])
        log = engine.run(t_start=args.t_start, t_end=args.t_end, dt=args.dt)
    except (ScenarioLoadError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    out = Path(args.out_dir)
    frame_path = render_frame(engine, out_html=str(out / "orrery_frame.html"))
    playback_path = render_playback(scenario, log, out_html=str(out / "orrery_playback.html"))
    json_path = export_log_to_json(log, out_path=str(out / "orbitlog.json"))
    bundle_path = export_playback_bundle(scenario, log, out_path=str(out / "playback_bundle.json"))

    print("Wrote:")
    for p in (frame_path, playback_path, json_path, bundle_path):
        print(" -", p)
    print("\nOpen the HTML files in your browser.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
