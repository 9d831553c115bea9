"""
SkyWeather - Pronóstico de máximas según tu ubicación
Aplicación principal
"""
import streamlit as st
st.set_page_config(
    page_title="SkyWeather",
    page_icon="⛅",
    layout="centered",
    initial_sidebar_state="collapsed"
)
import logging
from streamlit_autorefresh import st_autorefresh

# Imports locales
from config import POLL_INTERVAL_MS
from components import build_screen
from components.browser_geolocation import get_browser_geolocation
from components.render import render_background, render_screen
from components.views import background_for
from services.browser_location import BrowserLocationPlatform
from services.session import build_session

# Configurar logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _session_objects():
    """Plataforma y sesión viven en session_state: una por pestaña del navegador."""
    if "weather_session" not in st.session_state:
        platform = BrowserLocationPlatform()
        st.session_state["weather_platform"] = platform
        st.session_state["weather_session"] = build_session(platform)
        logger.info("Nueva sesión de SkyWeather")
    return st.session_state["weather_platform"], st.session_state["weather_session"]


platform, session = _session_objects()

# ============================================================
# PLATAFORMA -> PROVEEDOR DE UBICACIÓN
# ============================================================
geo_value = get_browser_geolocation(platform.request_id)
platform.sync(geo_value)

# ============================================================
# BUZÓN -> ESTADO (hilo de la UI)
# ============================================================
session.pump()

# ============================================================
# PANTALLA
# ============================================================
if not platform.reported:
    # El navegador todavía no ha contestado a la consulta de permisos
    render_background(background_for(session.is_night))
    st.caption("Waiting for location services...")
else:
    render_screen(build_screen(session.snapshot()), session)

if session.waiting:
    st_autorefresh(interval=POLL_INTERVAL_MS, key="poll_forecast")
