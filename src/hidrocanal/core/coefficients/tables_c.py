"""
Tabla de referencia de coeficientes de escorrentía C por uso de suelo.

Fuentes:
- FHWA HEC-22 (Federal Highway Administration)
- ASCE Manual of Practice No. 37 (rangos para método racional)
"""

from .types import LandUseEntry


LAND_USE_C_TABLE = [
    # Zonas desarrolladas
    LandUseEntry("Comercial", "Centro comercial/negocios", 0.70, 0.95, 0.85),
    LandUseEntry("Comercial", "Vecindario comercial", 0.50, 0.70, 0.60),
    LandUseEntry("Industrial", "Industria liviana", 0.50, 0.80, 0.65),
    LandUseEntry("Industrial", "Industria pesada", 0.60, 0.90, 0.75),
    # Residencial
    LandUseEntry("Residencial", "Unifamiliar", 0.30, 0.50, 0.40),
    LandUseEntry("Residencial", "Multifamiliar", 0.40, 0.75, 0.60),
    LandUseEntry("Residencial", "Suburbano", 0.25, 0.40),
    # Superficies
    LandUseEntry("Superficies", "Asfalto/Concreto", 0.70, 0.95, 0.85),
    LandUseEntry("Superficies", "Techos", 0.75, 0.95, 0.85),
    LandUseEntry("Superficies", "Adoquin/Ladrillo", 0.70, 0.85, 0.78),
    LandUseEntry("Superficies", "Grava/Ripio", 0.25, 0.40, 0.32),
    # Areas verdes
    LandUseEntry("Areas verdes", "Parques y cementerios", 0.10, 0.25),
    LandUseEntry("Areas verdes", "Cesped arenoso", 0.05, 0.20, 0.10),
    LandUseEntry("Areas verdes", "Cesped arcilloso", 0.13, 0.35, 0.20),
    LandUseEntry("Areas verdes", "Bosque", 0.05, 0.25, 0.15),
]
