"""
Módulo de servicios
"""
from .events import UiEventLoop, run_in_background
from .location import LocationPlatform, LocationProvider
from .browser_location import BrowserLocationPlatform
from .geocoding import reverse_geocode, placemark_from_payload

__all__ = [
    'UiEventLoop',
    'run_in_background',
    'LocationPlatform',
    'LocationProvider',
    'BrowserLocationPlatform',
    'reverse_geocode',
    'placemark_from_payload',
]
