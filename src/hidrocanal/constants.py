"""
Constantes por defecto de la simulación.

Valores representativos de un canal de tierra/hormigón y de la fracción de
la cuenca donde se acumula el agua desbordada.
"""

# Coeficiente de Manning del canal
DEFAULT_ROUGHNESS = 0.015

# Fracción del área de la cuenca que recibe el encharcamiento
DEFAULT_FLOOD_AREA_FACTOR = 0.2

# Piso para el denominador de la rama descendente del hietograma (hr)
FALLING_LIMB_EPSILON_HR = 1e-4

# Coeficiente de Kirpich para L en metros, S en m/m y Tc en minutos
KIRPICH_COEFFICIENT = 0.01947

SECONDS_PER_HOUR = 3600.0
MM_PER_M = 1000.0

MIXED_CATCHMENT_MESSAGE = (
    "Defina usos de suelo o un coeficiente C fijo con su área total, no ambos."
)
