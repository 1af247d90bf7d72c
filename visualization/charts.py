"""Plotly chart builders for the Pocketbook expense tracker."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = ["build_category_chart"]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_category_chart(category_df: pd.DataFrame, currency_symbol: str = "$") -> go.Figure:
    """Render a donut chart of spend per category."""

    if category_df.empty:
        return _empty_plotly_figure("No expenses recorded yet.")

    palette = list(TOKENS.category_palette)
    data = category_df.sort_values("Total", ascending=False).reset_index(drop=True)
    repeats = (len(data) // len(palette)) + 1
    color_sequence = (palette * repeats)[: len(data)]

    fig = px.pie(
        data,
        names="Category",
        values="Total",
        hole=0.55,
        color="Category",
        color_discrete_sequence=color_sequence,
    )

    fig.update_traces(
        textposition="inside",
        texttemplate="%{label}<br>%{percent:.1%}",
        customdata=data[["Total", "Share", "Count"]],
        hovertemplate=(
            "%{label}<br>"
            f"Spend: {currency_symbol}%{{customdata[0]:,.2f}}<br>"
            "Share: %{customdata[1]:.1%}<br>"
            "Expenses: %{customdata[2]}<extra></extra>"
        ),
        marker=dict(line=dict(color=TOKENS.neutral_white, width=2)),
    )

    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0),
        legend=dict(
            title="",
            orientation="v",
            yanchor="middle",
            y=0.5,
            xanchor="left",
            x=1.05,
            font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        ),
        showlegend=True,
    )

    return fig
