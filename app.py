"""
Web application for the Inverted Pendulum PID demo

Interactive dashboard that runs the simulation live and compares gain sets.
"""

import logging
import math
from typing import Any, Dict, List, Tuple

import dash
from dash import ctx, dcc, html, Input, Output, State
from dash.exceptions import PreventUpdate

from pendulum import ManualScheduler, PendulumSimulator, SimulationState, run_gain_sweep
from pendulum.render import create_cart_figure, create_response_figure

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 50

# The interval timer below plays the host's per-frame callback
scheduler = ManualScheduler()
display: Dict[str, Any] = {"fallen": False}


def show_frame(state: SimulationState, force: float) -> None:
    display["state"] = state
    display["force"] = force


def show_fallen(state: SimulationState) -> None:
    display["fallen"] = True


simulator = PendulumSimulator(scheduler=scheduler, renderer=show_frame, on_fallen=show_fallen)
simulator.reset()

SLIDER_STYLE = {'marginBottom': '15px'}


def gain_slider(label: str, slider_id: str, value: float, max_value: float, step: float) -> html.Div:
    return html.Div([
        html.Label(label, style={'fontWeight': 'bold'}),
        dcc.Slider(id=slider_id, min=0, max=max_value, step=step, value=value,
                   marks=None, tooltip={'placement': 'bottom', 'always_visible': True}),
    ], style=SLIDER_STYLE)


# Initialize Dash app
app = dash.Dash(__name__)
app.title = "Inverted Pendulum PID Control"

# Define app layout
app.layout = html.Div([
    html.Div([
        html.H1("Inverted Pendulum PID Control",
                style={'textAlign': 'center', 'marginBottom': '30px'}),

        html.Div([
            html.Div([
                gain_slider("Kp", 'kp-slider', simulator.gains.kp, 200, 1),
                gain_slider("Ki", 'ki-slider', simulator.gains.ki, 50, 0.5),
                gain_slider("Kd", 'kd-slider', simulator.gains.kd, 50, 0.5),
                html.Div([
                    html.Label("Initial Angle (degrees)", style={'fontWeight': 'bold'}),
                    dcc.Slider(id='theta0-slider', min=-30, max=30, step=1,
                               value=simulator.settings.initial_angle_deg, marks=None,
                               tooltip={'placement': 'bottom', 'always_visible': True}),
                ], style=SLIDER_STYLE),
                html.Button('Start', id='start-btn', n_clicks=0,
                            style={'width': '45%', 'padding': '10px', 'marginRight': '10%',
                                   'backgroundColor': '#4CAF50', 'color': 'white',
                                   'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'}),
                html.Button('Reset', id='reset-btn', n_clicks=0,
                            style={'width': '45%', 'padding': '10px',
                                   'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'}),
            ], style={'width': '30%', 'display': 'inline-block', 'verticalAlign': 'top',
                      'padding': '20px', 'backgroundColor': '#f5f5f5', 'borderRadius': '10px'}),

            html.Div([
                dcc.Graph(id='cart-graph', config={'displayModeBar': False}),
                html.Div(id='state-readout', style={'fontFamily': 'monospace', 'fontSize': '14px'}),
                html.Div(id='fallen-notice', style={'color': 'red', 'fontWeight': 'bold'}),
            ], style={'width': '65%', 'display': 'inline-block', 'marginLeft': '3%'}),
        ], style={'marginBottom': '30px'}),

        dcc.Interval(id='frame-interval', interval=FRAME_INTERVAL_MS, disabled=True),

        html.H2("Gain Comparison", style={'marginTop': '30px'}),
        html.Div([
            html.Div([
                html.Label("Gain Sets (Kp,Ki,Kd separated by ';'):",
                           style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(id='gains-input', type='text', value='50,0,20; 30,0,5; 100,5,30',
                          style={'width': '100%', 'padding': '8px'}),
            ], style={'width': '40%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Duration (s):", style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(id='duration-input', type='number', value=5.0, min=0.5, max=30.0, step=0.5,
                          style={'width': '100%', 'padding': '8px'}),
            ], style={'width': '15%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Div([
                html.Label("Initial Angle (degrees):", style={'fontWeight': 'bold', 'marginBottom': '5px'}),
                dcc.Input(id='sweep-theta-input', type='number', value=10.0, min=-89.0, max=89.0, step=1.0,
                          style={'width': '100%', 'padding': '8px'}),
            ], style={'width': '15%', 'display': 'inline-block', 'marginRight': '20px'}),

            html.Button('Run Comparison', id='sweep-button',
                        style={'width': '20%', 'padding': '10px', 'fontSize': '16px',
                               'backgroundColor': '#4CAF50', 'color': 'white',
                               'border': 'none', 'borderRadius': '5px', 'cursor': 'pointer'}),
        ], style={'marginBottom': '30px', 'padding': '20px', 'backgroundColor': '#f5f5f5',
                  'borderRadius': '10px'}),

        html.Div(id='status-message', style={'marginBottom': '20px', 'fontSize': '14px'}),

        dcc.Loading(id="loading", type="default", children=[html.Div(id='results-container')]),
    ], style={'maxWidth': '1400px', 'margin': '0 auto', 'padding': '20px'})
])


@app.callback(
    [
        Output("cart-graph", "figure"),
        Output("state-readout", "children"),
        Output("fallen-notice", "children"),
        Output("start-btn", "children"),
        Output("frame-interval", "disabled"),
    ],
    [
        Input("start-btn", "n_clicks"),
        Input("reset-btn", "n_clicks"),
        Input("frame-interval", "n_intervals"),
        Input("kp-slider", "value"),
        Input("ki-slider", "value"),
        Input("kd-slider", "value"),
        Input("theta0-slider", "value"),
    ],
)
def update_simulation(
    start_clicks: int, reset_clicks: int, n_intervals: int | None,
    kp: float, ki: float, kd: float, theta0_deg: float,
) -> tuple[Any, Any, Any, str, bool]:
    """Apply the triggering command, then redraw the latest frame"""
    trigger = ctx.triggered_id

    simulator.set_gains(kp, ki, kd)
    if trigger == "theta0-slider":
        simulator.set_initial_angle(theta0_deg)
    elif trigger == "start-btn":
        if simulator.is_running:
            simulator.pause()
        else:
            simulator.start()
    elif trigger == "reset-btn":
        display["fallen"] = False
        simulator.reset()
    elif trigger == "frame-interval":
        scheduler.fire()

    state = display["state"]
    force = display["force"]
    readout = (
        f"θ = {math.degrees(state.theta):.2f}°   ω = {state.theta_dot:.2f} rad/s   "
        f"x = {state.x:.2f} m   u = {force:.2f} N   t = {state.time:.2f} s"
    )
    notice = "The pendulum has fallen. Press Reset to try again." if display["fallen"] else ""
    running = simulator.is_running

    return (
        create_cart_figure(state, force, simulator.params, simulator.settings),
        readout,
        notice,
        "Pause" if running else "Start",
        not running,
    )


def parse_gain_sets(gains_str: str) -> List[Tuple[float, float, float]]:
    """Parse 'Kp,Ki,Kd; Kp,Ki,Kd' into gain triples"""
    gain_sets = []
    for chunk in gains_str.split(";"):
        if not chunk.strip():
            continue
        values = [float(v.strip()) for v in chunk.split(",")]
        if len(values) != 3:
            raise ValueError(f"Expected three gains in '{chunk.strip()}'")
        gain_sets.append((values[0], values[1], values[2]))
    if not gain_sets:
        raise ValueError("No gain sets given")
    return gain_sets


@app.callback(
    [Output("results-container", "children"), Output("status-message", "children")],
    [Input("sweep-button", "n_clicks")],
    [State("gains-input", "value"), State("duration-input", "value"), State("sweep-theta-input", "value")],
)
def update_results(
    n_clicks: int | None, gains_str: str, duration: float, initial_angle_deg: float
) -> tuple[Any, Any]:
    """Run the gain comparison and update results"""
    if n_clicks is None:
        raise PreventUpdate

    try:
        gain_sets = parse_gain_sets(gains_str)

        # Validate inputs
        if duration is None or duration <= 0 or duration > 30:
            return [], html.Div(
                "Error: Duration must be between 0.5 and 30 seconds.",
                style={"color": "red"},
            )

        if initial_angle_deg is None or abs(initial_angle_deg) >= 90:
            return [], html.Div(
                "Error: Initial angle must be within ±89 degrees.",
                style={"color": "red"},
            )

        results = run_gain_sweep(gain_sets, duration=duration, initial_angle_deg=initial_angle_deg)

        status_msg = html.Div(
            f"Simulation complete! Compared {len(gain_sets)} gain sets.",
            style={"color": "green"},
        )
        return create_results_layout(results), status_msg

    except Exception as e:
        logger.exception("Gain comparison failed")
        return [], html.Div(f"Error: {str(e)}", style={"color": "red"})


def create_results_layout(results: Dict[Tuple[float, float, float], Dict[str, Any]]) -> html.Div:
    """Create the comparison layout: summary table plus response figure"""
    table_rows = [
        html.Tr([
            html.Th("Kp"), html.Th("Ki"), html.Th("Kd"),
            html.Th("Outcome"),
            html.Th("Settling Time (s)"),
            html.Th("Max Angle (°)"),
            html.Th("Max Cart Travel (m)"),
            html.Th("Saturated (%)"),
            html.Th("Wall Hits"),
        ])
    ]

    for (kp, ki, kd), data in results.items():
        analysis = data["analysis"]
        outcome = "Fallen" if analysis["has_fallen"] else ("Settled" if analysis["is_stable"] else "Upright")
        outcome_color = "red" if analysis["has_fallen"] else "green"
        settling = analysis["settling_time"]
        table_rows.append(
            html.Tr([
                html.Td(f"{kp:g}"), html.Td(f"{ki:g}"), html.Td(f"{kd:g}"),
                html.Td(outcome, style={"color": outcome_color, "fontWeight": "bold"}),
                html.Td("-" if settling is None else f"{settling:.2f}"),
                html.Td(f"{math.degrees(analysis['angle_max']):.2f}"),
                html.Td(f"{analysis['cart_max']:.2f}"),
                html.Td(f"{analysis['saturation_fraction'] * 100:.1f}"),
                html.Td(analysis["wall_hits"]),
            ])
        )

    return html.Div([
        html.H3("Summary Table", style={"marginBottom": "15px"}),
        html.Table(
            table_rows,
            style={"width": "100%", "borderCollapse": "collapse", "marginBottom": "30px", "fontSize": "14px"},
        ),
        dcc.Graph(figure=create_response_figure(results)),
    ])


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    app.run(debug=True, port=8050)
