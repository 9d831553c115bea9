"""
Utilidades generales
"""
from .helpers import html_clean, html_text, linear_gradient_css

__all__ = [
    'html_clean',
    'html_text',
    'linear_gradient_css',
]
