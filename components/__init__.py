"""
Módulo de componentes visuales
"""
from .icons import icon_svg, icon_img
from .views import build_screen, build_weather_view, background_for, Screen

__all__ = [
    'icon_svg',
    'icon_img',
    'build_screen',
    'build_weather_view',
    'background_for',
    'Screen',
]
