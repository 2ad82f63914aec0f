"""
Modelos de muestreo de especies

EPPF de Dirichlet y Pitman-Yor, y sus momentos.
"""

from .eppf import (
    eppf_dirichlet,
    eppf_pitman_yor,
    log_eppf_dirichlet,
    log_eppf_pitman_yor,
)
from .species import expected_clusters, expected_block_counts, extrapolate_clusters

__all__ = [
    "eppf_dirichlet",
    "eppf_pitman_yor",
    "log_eppf_dirichlet",
    "log_eppf_pitman_yor",
    "expected_clusters",
    "expected_block_counts",
    "extrapolate_clusters",
]
