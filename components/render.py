"""
Dibujo con Streamlit del árbol de vistas
"""
import streamlit as st

from utils.helpers import html_clean, html_text, linear_gradient_css
from .icons import icon_img
from .views import Background, ErrorMessage, FallbackText, PermissionPrompt, Screen, WeatherView


def render_background(background: Background):
    """
    Aplica el degradado de fondo a toda la página y el texto en blanco.
    """
    gradient = linear_gradient_css(background.top_left, background.bottom_right)
    st.markdown(html_clean(f"""
    <style>
    [data-testid="stAppViewContainer"], [data-testid="stHeader"] {{
        background: {gradient} !important;
    }}
    [data-testid="stAppViewContainer"] p,
    [data-testid="stAppViewContainer"] span,
    [data-testid="stAppViewContainer"] label {{
        color: #ffffff;
    }}
    .sw-center {{ text-align: center; color: #ffffff; }}
    .sw-city {{ font-size: 32px; font-weight: 500; padding: 16px; }}
    .sw-main-temp {{ font-size: 70px; font-weight: 500; }}
    .sw-days {{ display: flex; justify-content: center; gap: 20px; margin: 12px 0 28px 0; }}
    .sw-day {{ display: flex; flex-direction: column; align-items: center; color: #ffffff; }}
    .sw-day-name {{ font-size: 16px; font-weight: 500; }}
    .sw-day-temp {{ font-size: 28px; font-weight: 500; }}
    .sw-error {{ background: #E0322B; color: #ffffff; padding: 16px; border-radius: 8px; text-align: center; }}
    div.stButton > button {{ background: #ffffff; color: #1E6BFF; font-weight: 600; border-radius: 10px; }}
    </style>
    """), unsafe_allow_html=True)


def _render_permission_prompt(body: PermissionPrompt, session):
    st.markdown(f"<div class='sw-center'>{icon_img(body.icon, uid='prompt', size=100)}</div>", unsafe_allow_html=True)
    st.button(f"📍 {body.button_label}", key="allow_tracking", on_click=session.request_permission, width="stretch")
    st.caption(body.caption)


def _render_error(body: ErrorMessage):
    st.markdown(html_clean(f"""
    <div class="sw-error">
      {icon_img(body.icon, uid=body.kind, size=100)}
      <div>{html_text(body.text)}</div>
    </div>
    """), unsafe_allow_html=True)


def _day_slot_html(slot, uid: str) -> str:
    return html_clean(f"""
    <div class="sw-day">
      <div class="sw-day-name">{html_text(slot.weekday)}</div>
      {icon_img(slot.icon, uid=uid, size=40)}
      <div class="sw-day-temp">{html_text(slot.temperature_text)}</div>
    </div>
    """)


def _render_weather(body: WeatherView, session):
    # Efecto secundario de mostrarse: empezar a escuchar la ubicación
    session.on_weather_view_shown()

    if body.status == "loading":
        st.markdown("<div class='sw-center'>⏳ Loading forecast...</div>", unsafe_allow_html=True)
        return

    if body.city_text:
        st.markdown(f"<div class='sw-center sw-city'>{html_text(body.city_text)}</div>", unsafe_allow_html=True)

    if body.status == "failed":
        st.warning(body.message)
        st.button(body.retry_label, key="retry_forecast", on_click=session.retry)
        return

    if body.main is not None:
        st.markdown(html_clean(f"""
        <div class="sw-center">
          {icon_img(body.main.icon, uid='main', size=180)}
          <div class="sw-main-temp">{html_text(body.main.temperature_text)}</div>
        </div>
        """), unsafe_allow_html=True)

    if body.status == "insufficient":
        st.info(body.message)
    else:
        slots = "".join(_day_slot_html(slot, uid=f"day{i}") for i, slot in enumerate(body.days, start=1))
        st.markdown(f"<div class='sw-days'>{slots}</div>", unsafe_allow_html=True)

    st.button(body.toggle_label, key="toggle_day_time", on_click=session.toggle_night, width="stretch")


def render_screen(screen: Screen, session):
    """
    Dibuja la pantalla completa. `session` recibe los clics (permiso, reintento, día/noche).
    """
    render_background(screen.background)
    body = screen.body

    if isinstance(body, PermissionPrompt):
        _render_permission_prompt(body, session)
    elif isinstance(body, ErrorMessage):
        _render_error(body)
    elif isinstance(body, WeatherView):
        _render_weather(body, session)
    elif isinstance(body, FallbackText):
        st.markdown(f"<div class='sw-center'>{html_text(body.text)}</div>", unsafe_allow_html=True)
