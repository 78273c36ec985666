"""
Hietograma triangular sintético.

La intensidad crece linealmente desde cero hasta el pico y decrece
linealmente hasta cero al final de la tormenta. El tiempo al pico es
Tc, limitado a la mitad de la duración.
"""

import logging

import numpy as np

from hidrocanal.config import HyetographResult
from hidrocanal.constants import FALLING_LIMB_EPSILON_HR

logger = logging.getLogger(__name__)


def triangular_factors(
    duration_hr: float,
    timesteps: int,
    peak_time_hr: float,
) -> np.ndarray:
    """
    Factores de intensidad (0-1) evaluados al centro de cada intervalo.

    Args:
        duration_hr: Duración total en horas
        timesteps: Número de intervalos
        peak_time_hr: Tiempo al pico en horas

    Returns:
        Array con un factor por intervalo
    """
    dt = duration_hr / timesteps
    t_mid = np.arange(timesteps) * dt + dt / 2

    falling_span = max(FALLING_LIMB_EPSILON_HR, duration_hr - peak_time_hr)
    with np.errstate(divide="ignore", invalid="ignore"):
        rising = t_mid / peak_time_hr
    falling = (duration_hr - t_mid) / falling_span

    factors = np.where(t_mid <= peak_time_hr, rising, falling)
    return np.clip(factors, 0.0, None)


def triangular_storm(
    total_depth_mm: float,
    duration_hr: float,
    timesteps: int,
    tc_hr: float,
    conserve_depth: bool = False,
) -> HyetographResult:
    """
    Genera hietograma triangular.

    Algoritmo:
    1. tp = min(Tc, D/2)
    2. ip = 2 × P / D (área del triángulo = P cuando tp = D/2)
    3. Factor lineal al centro de cada intervalo (subida 0→1, bajada 1→0)
    4. ΔP = ip × factor × Δt

    Args:
        total_depth_mm: Precipitación total en mm
        duration_hr: Duración total en horas
        timesteps: Número de intervalos
        tc_hr: Tiempo de concentración en horas
        conserve_depth: Si True, reescala para que la suma sea exactamente P

    Returns:
        HyetographResult con el hietograma generado
    """
    if duration_hr <= 0:
        raise ValueError("Duración debe ser > 0")
    if timesteps < 1:
        raise ValueError("Número de intervalos debe ser >= 1")
    if total_depth_mm < 0:
        raise ValueError("Precipitación no puede ser negativa")
    if tc_hr < 0:
        raise ValueError("Tiempo de concentración no puede ser negativo")

    dt = duration_hr / timesteps
    peak_time = min(tc_hr, 0.5 * duration_hr)
    peak_intensity = 2 * total_depth_mm / duration_hr

    factors = triangular_factors(duration_hr, timesteps, peak_time)
    depths = peak_intensity * factors * dt

    if conserve_depth:
        generated = float(np.sum(depths))
        if generated > 0:
            depths = depths * (total_depth_mm / generated)

    logger.debug(
        "Hietograma triangular: P=%.2f mm, D=%.2f h, tp=%.3f h, n=%d, suma=%.3f mm",
        total_depth_mm, duration_hr, peak_time, timesteps, float(np.sum(depths)),
    )

    time_hr = np.arange(timesteps) * dt + dt / 2
    intensities = depths / dt

    return HyetographResult(
        time_hr=time_hr.tolist(),
        intensity_mmhr=intensities.tolist(),
        depth_mm=depths.tolist(),
        cumulative_mm=np.cumsum(depths).tolist(),
        method="triangular",
        total_depth_mm=float(np.sum(depths)),
        peak_intensity_mmhr=float(np.max(intensities)),
        peak_time_hr=peak_time,
        timestep_hr=dt,
    )
