"""Profit analysis charts (price and volume tabs)."""

from __future__ import annotations
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from calculator.calculators import CalculationInputs, CalculationResults
from calculator.calculators.chart_data import (
    DEFAULT_VOLUME_RANGE,
    PRICE_SLIDER,
    VOLUME_SLIDER,
    default_price_range,
    price_sensitivity,
    volume_projection,
)

PROFIT_COLOR = "#22c55e"
REVENUE_COLOR = "#3b82f6"
COST_COLOR = "#ef4444"
TABLE_ROWS = 10


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def render_profit_chart(inputs: CalculationInputs, results: CalculationResults) -> None:
    """Render the Profit Analysis card."""
    st.subheader("Profit Analysis")
    view_mode = st.radio("View", ["Chart", "Table"], horizontal=True, key="chart_view_mode")

    price_tab, volume_tab = st.tabs(["Price Analysis", "Volume Analysis"])

    with price_tab:
        p_min, p_max, p_step = PRICE_SLIDER
        lo, hi = default_price_range(inputs.selling_price)
        price_range = st.slider(
            "Price Range ($)",
            min_value=p_min,
            max_value=p_max,
            value=(_clamp(lo, p_min, p_max), _clamp(hi, p_min, p_max)),
            step=p_step,
            key="chart_price_range",
        )
        df = price_sensitivity(inputs, price_range)

        if view_mode == "Chart":
            chart_type = st.radio("Chart type", ["Line", "Bar"], horizontal=True, key="chart_type")
            st.plotly_chart(_price_figure(df, chart_type), use_container_width=True)
        else:
            _render_table(df.rename(columns={
                "price": "Price ($)",
                "profit": "Net Profit ($)",
                "margin": "Margin (%)",
                "break_even": "Break-even Units",
            }))

    with volume_tab:
        v_min, v_max, v_step = VOLUME_SLIDER
        volume_range = st.slider(
            "Volume Range (units)",
            min_value=v_min,
            max_value=v_max,
            value=DEFAULT_VOLUME_RANGE,
            step=v_step,
            key="chart_volume_range",
        )
        df = volume_projection(inputs, results, volume_range)

        if view_mode == "Chart":
            st.plotly_chart(_volume_figure(df), use_container_width=True)
        else:
            _render_table(df.rename(columns={
                "volume": "Units",
                "total_profit": "Total Profit ($)",
                "total_revenue": "Total Revenue ($)",
                "total_costs": "Total Costs ($)",
                "profit_margin": "Margin (%)",
            }))


def _price_figure(df: pd.DataFrame, chart_type: str) -> go.Figure:
    fig = go.Figure()
    if chart_type == "Bar":
        fig.add_trace(go.Bar(x=df["price"], y=df["profit"], name="Net Profit", marker_color=PROFIT_COLOR))
    else:
        fig.add_trace(go.Scatter(
            x=df["price"], y=df["profit"], mode="lines+markers",
            name="Net Profit", line=dict(color=PROFIT_COLOR, width=2),
            customdata=df[["margin"]],
            hovertemplate="$%{x:.2f}<br>Net Profit: $%{y:.2f}<br>Margin: %{customdata[0]:.1f}%<extra></extra>",
        ))
    fig.update_layout(
        xaxis_title="Selling Price ($)",
        yaxis_title="Net Profit per Unit ($)",
        height=320,
        margin=dict(l=10, r=10, t=30, b=10),
    )
    return fig


def _volume_figure(df: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    for column, name, color in (
        ("total_profit", "Total Profit", PROFIT_COLOR),
        ("total_revenue", "Total Revenue", REVENUE_COLOR),
        ("total_costs", "Total Costs", COST_COLOR),
    ):
        fig.add_trace(go.Scatter(
            x=df["volume"], y=df[column], mode="lines",
            name=name, line=dict(color=color, width=2),
        ))
    fig.update_layout(
        xaxis_title="Units per Month",
        yaxis_title="$",
        height=320,
        margin=dict(l=10, r=10, t=30, b=10),
    )
    return fig


def _render_table(df: pd.DataFrame) -> None:
    st.dataframe(df.head(TABLE_ROWS).round(2), use_container_width=True, hide_index=True)
