"""
Plotly figures for the cart-pole display
"""

from typing import Any, Dict
import numpy as np
import plotly.express as px
import plotly.graph_objs as go
from plotly.subplots import make_subplots

from pendulum.params import PhysicalParameters, SimulationSettings
from pendulum.state import SimulationState

# Drawing dimensions (m)
CART_WIDTH = 0.8
CART_HEIGHT = 0.4
WHEEL_RADIUS = 0.1
BOB_RADIUS = 0.15
PIVOT_RADIUS = 0.06
FORCE_SCALE = 0.02  # m of arrow per N
TRACK_MARGIN = 0.6


def create_cart_figure(
    state: SimulationState,
    force: float,
    params: PhysicalParameters,
    settings: SimulationSettings,
) -> go.Figure:
    """
    Draw the cart, pendulum and applied force

    Args:
        state: State to draw
        force: Last applied force (N), drawn as an arrow on the cart
        params: Physical parameters (pendulum length)
        settings: Driver settings (track limit)

    Returns:
        Plotly figure in metres with equal axis scaling
    """
    half_span = settings.track_limit + TRACK_MARGIN
    cart_x = state.x
    cart_bottom = WHEEL_RADIUS
    cart_center_y = cart_bottom + CART_HEIGHT / 2
    pivot_y = cart_bottom + CART_HEIGHT

    # theta = 0 is upright
    bob_x = cart_x + params.length * np.sin(state.theta)
    bob_y = pivot_y + params.length * np.cos(state.theta)

    fig = go.Figure()

    # Ground and track
    fig.add_shape(type="line", x0=-half_span, y0=0, x1=half_span, y1=0,
                  line=dict(color="#e2e8f0", width=2))
    for wall in (-1, 1):
        edge = wall * (settings.track_limit + CART_WIDTH / 2)
        fig.add_shape(type="line", x0=edge, y0=0, x1=edge, y1=CART_HEIGHT,
                      line=dict(color="#cbd5e0", width=2, dash="dash"))

    # Cart and wheels
    fig.add_shape(type="rect",
                  x0=cart_x - CART_WIDTH / 2, y0=cart_bottom,
                  x1=cart_x + CART_WIDTH / 2, y1=pivot_y,
                  fillcolor="#1a365d", line=dict(width=0))
    for offset in (-CART_WIDTH / 3, CART_WIDTH / 3):
        fig.add_shape(type="circle",
                      x0=cart_x + offset - WHEEL_RADIUS, y0=0,
                      x1=cart_x + offset + WHEEL_RADIUS, y1=2 * WHEEL_RADIUS,
                      fillcolor="#333333", line=dict(width=0))

    # Upright reference
    fig.add_shape(type="line", x0=cart_x, y0=pivot_y, x1=cart_x, y1=pivot_y + params.length + 0.1,
                  line=dict(color="#a0aec0", width=1, dash="dot"))

    # Rod, pivot and bob
    fig.add_shape(type="line", x0=cart_x, y0=pivot_y, x1=bob_x, y1=bob_y,
                  line=dict(color="#2c5282", width=4))
    fig.add_shape(type="circle",
                  x0=cart_x - PIVOT_RADIUS, y0=pivot_y - PIVOT_RADIUS,
                  x1=cart_x + PIVOT_RADIUS, y1=pivot_y + PIVOT_RADIUS,
                  fillcolor="#718096", line=dict(width=0))
    fig.add_shape(type="circle",
                  x0=bob_x - BOB_RADIUS, y0=bob_y - BOB_RADIUS,
                  x1=bob_x + BOB_RADIUS, y1=bob_y + BOB_RADIUS,
                  fillcolor="#c53030", line=dict(width=0))

    force_length = force * FORCE_SCALE
    if abs(force_length) > 0.01:
        fig.add_annotation(
            x=cart_x + force_length, y=cart_center_y,
            ax=cart_x, ay=cart_center_y,
            xref="x", yref="y", axref="x", ayref="y",
            showarrow=True, arrowhead=2, arrowwidth=3, arrowcolor="#48bb78",
            text="",
        )

    fig.update_layout(
        xaxis=dict(range=[-half_span, half_span], showgrid=False, zeroline=False, visible=False),
        yaxis=dict(range=[-0.2, pivot_y + params.length + BOB_RADIUS + 0.3],
                   scaleanchor="x", scaleratio=1, visible=False),
        margin=dict(l=10, r=10, t=10, b=10),
        height=320,
        template="plotly_white",
        showlegend=False,
    )
    return fig


def create_response_figure(results: Dict[Any, Dict[str, Any]]) -> go.Figure:
    """
    Pendulum angle and cart position over time for each run of a gain sweep

    Args:
        results: Output of run_gain_sweep

    Returns:
        Two-row figure (angle in degrees, cart position in metres)
    """
    fig = make_subplots(rows=2, cols=1, shared_xaxes=True, vertical_spacing=0.08,
                        subplot_titles=("Pendulum Angle", "Cart Position"))
    colors = px.colors.qualitative.Set1

    for i, (gains, data) in enumerate(results.items()):
        kp, ki, kd = gains
        label = f"Kp={kp:g} Ki={ki:g} Kd={kd:g}"
        t = data["time"]
        theta = np.degrees(data["state"][:, 2])
        x = data["state"][:, 0]
        color = "red" if data["analysis"]["has_fallen"] else colors[i % len(colors)]

        fig.add_trace(
            go.Scatter(
                x=t, y=theta, mode="lines", name=label, legendgroup=label,
                line=dict(color=color, width=2),
                hovertemplate=f"{label}<br>Time: %{{x:.2f}}s<br>Angle: %{{y:.2f}}°<extra></extra>",
            ),
            row=1, col=1,
        )
        fig.add_trace(
            go.Scatter(
                x=t, y=x, mode="lines", name=label, legendgroup=label, showlegend=False,
                line=dict(color=color, width=2),
                hovertemplate=f"{label}<br>Time: %{{x:.2f}}s<br>Position: %{{y:.3f}}m<extra></extra>",
            ),
            row=2, col=1,
        )

    fig.update_yaxes(title_text="Angle (degrees)", row=1, col=1)
    fig.update_yaxes(title_text="Position (m)", row=2, col=1)
    fig.update_xaxes(title_text="Time (s)", row=2, col=1)
    fig.update_layout(height=600, hovermode="closest", template="plotly_white")
    return fig
