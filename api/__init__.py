"""
Módulo API
"""
from .open_meteo import (
    ForecastError,
    ForecastClient,
    build_forecast_url,
    decode_forecast,
    fetch_forecast_sync,
)

__all__ = [
    'ForecastError',
    'ForecastClient',
    'build_forecast_url',
    'decode_forecast',
    'fetch_forecast_sync',
]
