from __future__ import annotations

from pathlib import Path
from typing import List

import plotly.graph_objects as go

from orrery.core.frames import Vector2
from orrery.physics.orbit import orbit_ellipse
from orrery.simulation.engine import OrbitalEngine, SimulationLog
from orrery.simulation.scenario import Scenario


def _xy(points: List[Vector2]):
    return [p[0] for p in points], [p[1] for p in points]


def _orbit_traces(scenario: Scenario) -> List[go.Scatter]:
    traces = []
    for body in scenario.body_list():
        pts = [scenario.to_screen(p) for p in orbit_ellipse(body.elements)]
        xs, ys = _xy(pts)
        traces.append(go.Scatter(
            x=xs, y=ys,
            mode="lines",
            line=dict(color="white", width=1),
            opacity=0.2,
            hoverinfo="skip",
            showlegend=False,
            name=f"{body.name} orbit",
        ))
    return traces


def _star_traces(scenario: Scenario) -> List[go.Scatter]:
    star = scenario.star
    sx, sy = scenario.star_screen_position
    return [
        # glow
        go.Scatter(
            x=[sx], y=[sy],
            mode="markers",
            marker=dict(size=star.radius * 4, color=star.color),
            opacity=0.35,
            hoverinfo="skip",
            showlegend=False,
        ),
        go.Scatter(
            x=[sx], y=[sy],
            mode="markers+text",
            marker=dict(size=star.radius * 2, color=star.color),
            text=[star.name],
            textposition="top center",
            textfont=dict(color="white", size=12),
            name=star.name,
        ),
    ]


def _layout(fig: go.Figure, scenario: Scenario, title: str) -> None:
    fig.update_layout(
        title=title,
        template="plotly_dark",
        plot_bgcolor="black",
        xaxis=dict(range=[0, scenario.canvas_width], showgrid=False, zeroline=False, visible=False),
        # canvas convention: y grows downward
        yaxis=dict(
            range=[scenario.canvas_height, 0],
            showgrid=False, zeroline=False, visible=False,
            scaleanchor="x", scaleratio=1,
        ),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )


def build_frame_figure(engine: OrbitalEngine, title: str = "Orrery") -> go.Figure:
    """
    One rendered frame of the engine's current state:
      - orbit outlines
      - trails (when enabled)
      - star with glow
      - bodies with labels
    """
    scenario = engine.scenario
    fig = go.Figure()

    for tr in _orbit_traces(scenario):
        fig.add_trace(tr)

    if engine.clock.trails_enabled:
        for body in scenario.body_list():
            trail = engine.trail(body.name)
            if len(trail) < 2:
                continue
            xs, ys = _xy([scenario.to_screen(p) for p in trail])
            fig.add_trace(go.Scatter(
                x=xs, y=ys,
                mode="lines",
                line=dict(color=body.color, width=2),
                opacity=0.25,
                hoverinfo="skip",
                showlegend=False,
                name=f"{body.name} trail",
            ))

    for tr in _star_traces(scenario):
        fig.add_trace(tr)

    for body in scenario.body_list():
        x, y = scenario.to_screen(engine.state(body.name).position)
        fig.add_trace(go.Scatter(
            x=[x], y=[y],
            mode="markers+text",
            marker=dict(size=body.radius * 2, color=body.color),
            text=[body.name],
            textposition="top center",
            textfont=dict(color="white", size=12),
            name=body.name,
        ))

    _layout(fig, scenario, f"{title} ({engine.clock.speed_label})")
    return fig


def render_frame(engine: OrbitalEngine, out_html: str = "out/orrery_frame.html") -> str:
    fig = build_frame_figure(engine)
    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html


def build_playback_figure(scenario: Scenario, log: SimulationLog, title: str = "Orrery Playback") -> go.Figure:
    """
    Animated playback of a recorded run: static orbits and star, with one
    marker per body moving across the logged timesteps.
    """
    names = [b.name for b in scenario.body_list() if b.name in log.body_positions]
    if not names:
        raise ValueError("No body positions found in log.")

    times = log.times()
    screen = {
        name: [scenario.to_screen(r) for (_t, r) in log.body_positions[name]]
        for name in names
    }

    fig = go.Figure()
    for tr in _orbit_traces(scenario):
        fig.add_trace(tr)
    for tr in _star_traces(scenario):
        fig.add_trace(tr)

    first_marker = len(fig.data)
    for name in names:
        body = scenario.bodies[name]
        x, y = screen[name][0]
        fig.add_trace(go.Scatter(
            x=[x], y=[y],
            mode="markers+text",
            marker=dict(size=body.radius * 2, color=body.color),
            text=[name],
            textposition="top center",
            textfont=dict(color="white", size=12),
            name=name,
        ))
    marker_idx = list(range(first_marker, first_marker + len(names)))

    # Frames update the body marker traces only
    frames = []
    for i in range(len(times)):
        frames.append(go.Frame(
            name=str(i),
            data=[
                go.Scatter(x=[screen[name][i][0]], y=[screen[name][i][1]])
                for name in names
            ],
            traces=marker_idx,
        ))
    fig.frames = frames

    _layout(fig, scenario, title)
    fig.update_layout(
        updatemenus=[dict(
            type="buttons",
            showactive=True,
            buttons=[
                dict(label="Play", method="animate",
                     args=[None, {"frame": {"duration": 30, "redraw": False}, "fromcurrent": True}]),
                dict(label="Pause", method="animate",
                     args=[[None], {"frame": {"duration": 0, "redraw": False}, "mode": "immediate"}]),
            ],
        )],
        sliders=[dict(
            steps=[dict(method="animate", args=[[str(i)], {"mode": "immediate", "frame": {"duration": 0, "redraw": False}}],
                        label=f"{times[i]:g}") for i in range(0, len(times), max(1, len(times) // 20))],
            active=0,
        )],
    )
    return fig


def render_playback(
    scenario: Scenario,
    log: SimulationLog,
    out_html: str = "out/orrery_playback.html",
) -> str:
    fig = build_playback_figure(scenario, log)
    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html
