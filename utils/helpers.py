"""
Funciones auxiliares generales
"""
import textwrap
from html import escape


def html_clean(s: str) -> str:
    """Limpia y dedenta HTML"""
    return textwrap.dedent(s).strip()


def html_text(value) -> str:
    """Escapa texto de usuario/API para incrustarlo en HTML"""
    if value is None:
        return ""
    return escape(str(value))


def linear_gradient_css(top_left: str, bottom_right: str) -> str:
    """Degradado de esquina superior izquierda a inferior derecha"""
    return f"linear-gradient(135deg, {top_left} 0%, {bottom_right} 100%)"
