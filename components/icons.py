"""
Generador de iconos SVG para la pantalla del tiempo
"""
import base64
from utils.helpers import html_clean

ICON_KINDS = ("sunny", "cloudy", "moon", "location", "error")


def icon_svg(kind: str, uid: str, size: int = 54) -> str:
    """
    Genera SVG de icono según el tipo

    Args:
        kind: Tipo de icono (sunny, cloudy, moon, location, error)
        uid: ID único para evitar colisiones en gradientes
        size: Lado en píxeles

    Returns:
        String con SVG completo ("" si el tipo no existe)
    """
    g = lambda name: f"{name}-{uid}"

    if kind == "sunny":
        rays = "".join(
            f'<rect x="25.6" y="4" width="2.8" height="8" rx="1.4" fill="#FFD56A" transform="rotate({a} 27 27)"/>'
            for a in range(0, 360, 45)
        )
        return html_clean(f"""
        <svg width="{size}" height="{size}" viewBox="0 0 54 54" xmlns="http://www.w3.org/2000/svg">
          <defs>
            <radialGradient id="{g('sun')}" cx="40%" cy="35%" r="70%">
              <stop offset="0" stop-color="#FFF3B0"/>
              <stop offset="0.6" stop-color="#FFC93C"/>
              <stop offset="1" stop-color="#FF9F1C"/>
            </radialGradient>
          </defs>
          {rays}
          <circle cx="27" cy="27" r="11" fill="url(#{g('sun')})"/>
        </svg>
        """)

    if kind == "cloudy":
        return html_clean(f"""
        <svg width="{size}" height="{size}" viewBox="0 0 54 54" xmlns="http://www.w3.org/2000/svg">
          <defs>
            <radialGradient id="{g('sun')}" cx="40%" cy="35%" r="70%">
              <stop offset="0" stop-color="#FFF3B0"/>
              <stop offset="1" stop-color="#FFB627"/>
            </radialGradient>
            <linearGradient id="{g('cloud')}" x1="0" y1="0" x2="0" y2="1">
              <stop offset="0" stop-color="#FFFFFF"/>
              <stop offset="1" stop-color="#DCE6F2"/>
            </linearGradient>
          </defs>
          <circle cx="33" cy="19" r="9" fill="url(#{g('sun')})"/>
          <path d="M15 41h24a8 8 0 0 0 0-16 11 11 0 0 0-20.6 3.2A6.5 6.5 0 0 0 15 41z"
                fill="url(#{g('cloud')})"/>
        </svg>
        """)

    if kind == "moon":
        stars = "".join(
            f'<circle cx="{x}" cy="{y}" r="{r}" fill="#FFFFFF" opacity="0.9"/>'
            for x, y, r in ((40, 12, 1.6), (45, 22, 1.1), (34, 6, 0.9))
        )
        return html_clean(f"""
        <svg width="{size}" height="{size}" viewBox="0 0 54 54" xmlns="http://www.w3.org/2000/svg">
          <defs>
            <linearGradient id="{g('moon')}" x1="0" y1="0" x2="1" y2="1">
              <stop offset="0" stop-color="#FFF6CC"/>
              <stop offset="1" stop-color="#F2C94C"/>
            </linearGradient>
          </defs>
          <path d="M30 44a17 17 0 1 1 0-34 13 13 0 1 0 0 34z" fill="url(#{g('moon')})"/>
          {stars}
        </svg>
        """)

    if kind == "location":
        return html_clean(f"""
        <svg width="{size}" height="{size}" viewBox="0 0 54 54" xmlns="http://www.w3.org/2000/svg">
          <circle cx="27" cy="27" r="24" fill="none" stroke="#1E6BFF" stroke-width="3"/>
          <path d="M37 17L14 26.5l10 3.5 3.5 10z" fill="#1E6BFF"/>
        </svg>
        """)

    if kind == "error":
        return html_clean(f"""
        <svg width="{size}" height="{size}" viewBox="0 0 54 54" xmlns="http://www.w3.org/2000/svg">
          <path d="M18 3h18l15 15v18L36 51H18L3 36V18z" fill="none" stroke="#FFFFFF" stroke-width="3"/>
          <path d="M19 19l16 16M35 19L19 35" stroke="#FFFFFF" stroke-width="3.5" stroke-linecap="round"/>
        </svg>
        """)

    return ""


def icon_img(kind: str, uid: str, size: int = 54) -> str:
    """
    Convierte SVG a imagen base64 embebida

    Returns:
        HTML img tag con SVG embebido
    """
    svg = icon_svg(kind, uid=uid, size=size)
    b64 = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"<img class='icon-img icon-{kind}' width='{size}' height='{size}' src='data:image/svg+xml;base64,{b64}'/>"
