"""
Coeficientes de Manning de referencia para canales.

Fuente: Ven Te Chow - Open-Channel Hydraulics (Tabla 5-6), valores normales.
"""

CHANNEL_ROUGHNESS_N = {
    "concrete_finished": 0.013,
    "concrete_unfinished": 0.015,
    "brick": 0.015,
    "masonry": 0.025,
    "earth_clean": 0.022,
    "earth_grass": 0.027,
    "earth_weedy": 0.035,
    "natural_stream": 0.035,
}
