"""Plotly figures for the results and admin views."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from src.domain.services.results_tally import ResultRow


PALETTE = ["#0f3d91", "#e03e3e", "#0b8fd6", "#f2b632"]
DEFAULT_BAR_COLOR = PALETTE[0]

_TRANSPARENT_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    margin=dict(l=20, r=20, t=50, b=20),
)


def make_results_figure(rows: list[ResultRow], title: str = "") -> go.Figure:
    """Votes per candidate as bars, with the percentage on a second axis."""
    fig = go.Figure()
    if not rows:
        return fig

    names = [r.name for r in rows]
    fig.add_trace(
        go.Bar(
            x=names,
            y=[r.votes for r in rows],
            name="Votos",
            marker_color=[r.color or DEFAULT_BAR_COLOR for r in rows],
        )
    )
    fig.add_trace(
        go.Scatter(
            x=names,
            y=[r.percentage for r in rows],
            name="Porcentaje (%)",
            mode="lines+markers",
            yaxis="y2",
            line=dict(color=PALETTE[1], width=2),
        )
    )
    fig.update_layout(
        title=title,
        yaxis=dict(title="Votos"),
        yaxis2=dict(title="Porcentaje (%)", overlaying="y", side="right"),
        legend=dict(orientation="h", y=-0.2),
        **_TRANSPARENT_LAYOUT,
    )
    return fig


def make_results_pie(rows: list[ResultRow]) -> go.Figure:
    fig = go.Figure()
    if not rows:
        return fig
    fig.add_trace(
        go.Pie(
            labels=[r.name for r in rows],
            values=[r.votes for r in rows],
            marker=dict(colors=[r.color or DEFAULT_BAR_COLOR for r in rows]),
            hole=0.35,
        )
    )
    fig.update_layout(**_TRANSPARENT_LAYOUT)
    return fig


def make_votes_by_hour_figure(df: pd.DataFrame, peak_hour: int | None) -> go.Figure:
    """Area chart of votes per hour of day."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=df["Hora"],
            y=df["Votos"],
            name="Votos",
            mode="lines",
            fill="tozeroy",
            line=dict(color=PALETTE[0]),
        )
    )
    title = "Flujo de Votación por Hora"
    if peak_hour is not None:
        title += f" (hora pico: {peak_hour}:00)"
    fig.update_layout(
        title=title,
        xaxis_title="Hora del día",
        yaxis_title="Votos",
        **_TRANSPARENT_LAYOUT,
    )
    return fig


def make_distribution_pie(df: pd.DataFrame, title: str) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Pie(
            labels=df["Categoría"],
            values=df["Votos"],
            marker=dict(colors=PALETTE),
            textinfo="label+percent",
        )
    )
    fig.update_layout(title=title, showlegend=False, **_TRANSPARENT_LAYOUT)
    return fig


def make_training_history_figure(history: pd.DataFrame) -> go.Figure:
    """Loss and accuracy per epoch; ``history`` is indexed by epoch."""
    fig = go.Figure()
    colors = {"loss": PALETTE[1], "accuracy": PALETTE[2]}
    for column in history.columns:
        fig.add_trace(
            go.Scatter(
                x=history.index,
                y=history[column],
                name=column.capitalize(),
                mode="lines",
                line=dict(color=colors.get(column, PALETTE[0]), width=2),
            )
        )
    fig.update_layout(
        title=f"Historial de Entrenamiento ({len(history)} epochs)",
        xaxis_title="Epoch",
        **_TRANSPARENT_LAYOUT,
    )
    return fig


def make_feature_importance_figure(items: list[tuple[str, float]]) -> go.Figure:
    fig = go.Figure()
    if not items:
        return fig
    names, values = zip(*reversed(items))
    fig.add_trace(
        go.Bar(x=list(values), y=list(names), orientation="h", marker_color=PALETTE[0])
    )
    fig.update_layout(title="Importancia de Variables", **_TRANSPARENT_LAYOUT)
    return fig


def make_confusion_matrix_figure(matrix: list[list[float]]) -> go.Figure:
    fig = go.Figure(
        go.Heatmap(z=matrix, colorscale="Blues", texttemplate="%{z}", showscale=False)
    )
    fig.update_layout(
        title="Matriz de Confusión",
        xaxis_title="Predicho",
        yaxis_title="Real",
        yaxis=dict(autorange="reversed"),
        **_TRANSPARENT_LAYOUT,
    )
    return fig


def make_cluster_sizes_figure(clusters: list[dict]) -> go.Figure:
    fig = go.Figure()
    if not clusters:
        return fig
    fig.add_trace(
        go.Bar(
            x=[f"Cluster {c['cluster_id']}" for c in clusters],
            y=[c["size"] for c in clusters],
            marker_color=[PALETTE[i % len(PALETTE)] for i in range(len(clusters))],
            text=[f"{c['percentage']}%" for c in clusters],
        )
    )
    fig.update_layout(title="Tamaño de Clusters", yaxis_title="Votantes", **_TRANSPARENT_LAYOUT)
    return fig
