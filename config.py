"""
Configuración global de SkyWeather
"""

# ============================================================
# API OPEN-METEO (PRONÓSTICO)
# ============================================================
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
FORECAST_DAILY_METRIC = "temperature_2m_max"
FORECAST_TIMEZONE = "GMT"
FORECAST_TIMEOUT_SECONDS = 15

# ============================================================
# GEOCODIFICACIÓN INVERSA (NOMINATIM)
# ============================================================
NOMINATIM_REVERSE_URL = "https://nominatim.openstreetmap.org/reverse"
NOMINATIM_USER_AGENT = "SkyWeather/1.0 (contact: skyweather@example.com)"
GEOCODE_TIMEOUT_SECONDS = 12

# ============================================================
# LÓGICA DE PRESENTACIÓN
# ============================================================
SUNNY_THRESHOLD_C = 26.0  # A partir de aquí el icono del día es "sunny"
FORECAST_SLOTS = 5  # Días mostrados después de hoy
MIN_FORECAST_DAYS = FORECAST_SLOTS + 1  # Hoy + 5 días

# ============================================================
# COLORES DEL FONDO (degradado superior izquierda -> inferior derecha)
# ============================================================
DAY_GRADIENT = ("#1E6BFF", "#9FD6FF")
NIGHT_GRADIENT = ("#000000", "#8E8E93")

# ============================================================
# GEOLOCALIZACIÓN DEL NAVEGADOR
# ============================================================
GEO_TIMEOUT_MS = 12000
GEO_HIGH_ACCURACY = True

# ============================================================
# REFRESCO MIENTRAS HAY TRABAJO PENDIENTE
# ============================================================
POLL_INTERVAL_MS = 1000
