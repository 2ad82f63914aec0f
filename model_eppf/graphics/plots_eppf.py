# Graficas de los modelos de muestreo de especies

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from typing import Optional, Tuple, List

from ..models.species import expected_clusters, expected_block_counts
from ..fit.frequencies import frequency_of_frequencies
from ..utils.sistem_fun import get_report_path

sns.set_style("whitegrid")


def _param_label(alpha: float, sigma: float) -> str:
    if sigma == 0:
        return f"DP (α={alpha:g})"
    return f"PY (α={alpha:g}, σ={sigma:g})"


def plot_expected_clusters(n_max: int,
                           params: List[Tuple[float, float]],
                           figsize: Tuple[int, int] = (10, 6),
                           title: str = "Número esperado de bloques",
                           save_path: Optional[str] = None) -> plt.Figure:
    """
    Grafica E[K_n] para n = 1, ..., n_max.

    Parameters
    ----------
    n_max : int
        Tamaño muestral máximo
    params : list of (alpha, sigma)
        Una curva por cada par de parámetros
    figsize : tuple
        Tamaño de la figura
    title : str
        Título de la figura
    save_path : str, optional
        Ruta para guardar la figura

    Returns
    -------
    fig : plt.Figure
    """
    if n_max < 1:
        raise ValueError(f"n_max debe ser >= 1, se recibió {n_max}")

    n_grid = np.arange(1, n_max + 1)
    colors = sns.color_palette("husl", len(params))

    fig, ax = plt.subplots(figsize=figsize)
    for (alpha, sigma), color in zip(params, colors):
        ax.plot(n_grid, expected_clusters(n_grid, alpha, sigma),
                linewidth=2, color=color, label=_param_label(alpha, sigma))

    ax.set_xlabel('n', fontsize=12)
    ax.set_ylabel(r'$E[K_n]$', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.legend()
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig


def plot_block_frequencies(n: int,
                           params: List[Tuple[float, float]],
                           r_max: Optional[int] = None,
                           abundances: Optional[np.ndarray] = None,
                           figsize: Tuple[int, int] = (10, 6),
                           title: str = "Frecuencias esperadas por tamaño de bloque",
                           save_path: Optional[str] = None) -> plt.Figure:
    """
    Grafica en escala log-log E[M_{r,n}] frente a r.

    Si se pasan ``abundances`` se superpone la tabla observada de
    frecuencias de frecuencias.

    Parameters
    ----------
    n : int
        Tamaño muestral
    params : list of (alpha, sigma)
        Una curva por cada par de parámetros
    r_max : int, optional
        Tamaño de bloque máximo a graficar (por defecto n)
    abundances : array-like, optional
        Abundancias observadas (vector 1D)
    save_path : str, optional
        Ruta para guardar la figura

    Returns
    -------
    fig : plt.Figure
    """
    r_max = n if r_max is None else min(r_max, n)
    r_grid = np.arange(1, r_max + 1)
    colors = sns.color_palette("husl", len(params))

    fig, ax = plt.subplots(figsize=figsize)
    for (alpha, sigma), color in zip(params, colors):
        ax.plot(r_grid, expected_block_counts(r_grid, n, alpha, sigma),
                linewidth=2, color=color, label=_param_label(alpha, sigma))

    if abundances is not None:
        freq = frequency_of_frequencies(abundances)
        r_obs = np.arange(1, freq.size + 1)
        mask = freq > 0
        ax.scatter(r_obs[mask], freq[mask], s=15, alpha=0.6,
                   color='black', label='Observado')

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('Tamaño de bloque r', fontsize=12)
    ax.set_ylabel(r'$E[M_{r,n}]$', fontsize=12)
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.legend()
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig


def save_report_figure(fig: plt.Figure, config: dict, filename: str,
                       verbose: bool = True):
    """
    Guarda una figura en el directorio de gráficas definido en config.yaml.
    """
    report_path = get_report_path(config, "graphics") / filename
    fig.savefig(report_path, dpi=300, bbox_inches='tight')

    if verbose:
        print("✅ Figura guardada")
        print(f"📁 Ruta: {report_path}")

    return report_path
