"""Streamlit page for city forecasts.

Run with: streamlit run city_forecast/ui/dashboard.py
"""

import html

import pandas as pd
import streamlit as st

from city_forecast.errors import ForecastError, NotFound
from city_forecast.models import WeatherDisplay
from city_forecast.service import WeatherService


@st.cache_resource
def get_service() -> WeatherService:
    """One service per Streamlit process; it holds no per-query state."""
    return WeatherService()


def forecast_frame(display: WeatherDisplay) -> pd.DataFrame:
    """Display rows as a two-column table."""
    return pd.DataFrame(
        [(e.label, e.temperature_label) for e in display.forecasts],
        columns=["Time", "Temperature"],
    )


def render_forecast(display: WeatherDisplay) -> None:
    """Render the forecast header and table."""
    st.markdown(
        f"""<div style="
            background: #1e293b;
            border: 1px solid #334155;
            border-left: 4px solid #3b82f6;
            border-radius: 8px;
            padding: 1rem 1.5rem;
            margin-bottom: 1rem;
        ">
            <div style="color: #94a3b8; font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.1em;">
                Hourly forecast
            </div>
            <div style="font-size: 1.75rem; font-weight: 700; color: #f1f5f9;">
                {html.escape(display.city)}
            </div>
        </div>""",
        unsafe_allow_html=True,
    )

    if not display.forecasts:
        st.info("No forecast data available")
        return

    st.dataframe(forecast_frame(display), hide_index=True, use_container_width=True)


def main() -> None:
    """Main page entry point."""
    st.set_page_config(
        page_title="City Forecast",
        page_icon="",
        layout="centered",
    )

    st.markdown(
        """
        <style>
            .stApp { background-color: #0f172a; }
            .stMarkdown, .stText, p, span, label { color: #e2e8f0; }
            h1, h2, h3, h4 { color: #f1f5f9 !important; font-weight: 600 !important; }
            #MainMenu, footer { visibility: hidden; }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.title("City Forecast")

    with st.form("city_form"):
        city = st.text_input("City", placeholder="e.g. Paris")
        submitted = st.form_submit_button("Get forecast")

    if not submitted:
        return

    try:
        with st.spinner("Loading..."):
            display = get_service().get_weather(city)
    except NotFound as e:
        st.warning(str(e))
        return
    except ForecastError as e:
        st.error(str(e))
        return

    render_forecast(display)


if __name__ == "__main__":
    main()
