"""
model_eppf

Funciones de probabilidad de particiones intercambiables (EPPF) para los
procesos de Dirichlet y Pitman-Yor, y momentos de los modelos de muestreo
de especies asociados.
"""

from .models.eppf import (
    eppf_dirichlet,
    eppf_pitman_yor,
    log_eppf_dirichlet,
    log_eppf_pitman_yor,
)
from .models.species import (
    expected_clusters,
    expected_block_counts,
    extrapolate_clusters,
)
from .fit.frequencies import frequency_of_frequencies, partition_summary
from .bindings import EPPF_Dirichlet, EPPF_PitmanYor, call_entry
from .utils.validation import InvalidParameter

__version__ = "0.1.0"

__all__ = [
    "eppf_dirichlet",
    "eppf_pitman_yor",
    "log_eppf_dirichlet",
    "log_eppf_pitman_yor",
    "expected_clusters",
    "expected_block_counts",
    "extrapolate_clusters",
    "frequency_of_frequencies",
    "partition_summary",
    "EPPF_Dirichlet",
    "EPPF_PitmanYor",
    "call_entry",
    "InvalidParameter",
]
