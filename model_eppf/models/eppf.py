"""
Funciones de probabilidad de particiones intercambiables (EPPF).

Implementa la EPPF del proceso de Dirichlet y la del proceso Pitman-Yor.
Ambas se acumulan en escala logarítmica (diferencias de log-gamma y
log de cada término del factorial ascendente) y se exponencian una sola vez
al final para evitar overflow/underflow cuando n o k son grandes.

    Dirichlet:   p(n_1..n_k) = α^k Γ(α) / Γ(α + n) · Π_j Γ(n_j)

    Pitman-Yor:  p(n_1..n_k) = Π_{i=0}^{k-1} (α + iσ) / Π_{i=0}^{n-1} (α + i)
                               · Π_j Γ(n_j - σ) / Γ(1 - σ)
"""

import numpy as np
from scipy.special import gammaln

from ..utils.validation import (
    _validate_counts,
    _validate_dirichlet,
    _validate_pitman_yor,
)


def log_eppf_dirichlet(counts, alpha):
    """
    Log-EPPF del proceso de Dirichlet.

    Parameters
    ----------
    counts : array-like of int
        Tamaños de los bloques (todos >= 1)
    alpha : float
        Parámetro de concentración, alpha > 0

    Returns
    -------
    float
        log p(counts | alpha)

    Raises
    ------
    InvalidParameter
        Si alpha <= 0 o algún tamaño de bloque es <= 0
    """
    counts = _validate_counts(counts)
    alpha = _validate_dirichlet(alpha)

    n = counts.sum()
    k = counts.size

    out = k * np.log(alpha) + gammaln(alpha) - gammaln(alpha + n)
    out += gammaln(counts).sum()
    return float(out)


def log_eppf_pitman_yor(counts, alpha, sigma):
    """
    Log-EPPF del proceso Pitman-Yor.

    El primer factor del numerador (α + 0·σ = α) se cancela con el primero
    del denominador, así la expresión queda definida también para
    -σ < α <= 0:

        Σ_{i=1}^{k-1} log(α + iσ) - [log Γ(α + n) - log Γ(α + 1)]
        + Σ_j [log Γ(n_j - σ) - log Γ(1 - σ)]

    Parameters
    ----------
    counts : array-like of int
        Tamaños de los bloques (todos >= 1)
    alpha : float
        Parámetro de concentración, alpha > -sigma
    sigma : float
        Parámetro de descuento, 0 <= sigma < 1

    Returns
    -------
    float
        log p(counts | alpha, sigma)
    """
    counts = _validate_counts(counts)
    alpha, sigma = _validate_pitman_yor(alpha, sigma)

    n = counts.sum()
    k = counts.size

    # Factorial ascendente generalizado del numerador
    out = np.log(alpha + sigma * np.arange(1, k)).sum()
    # (α + 1)_{n-1}
    out -= gammaln(alpha + n) - gammaln(alpha + 1)
    out += (gammaln(counts - sigma) - gammaln(1 - sigma)).sum()
    return float(out)


def eppf_dirichlet(counts, alpha):
    """
    EPPF del proceso de Dirichlet (probabilidad, no log).

    Con un único bloque de tamaño n y alpha = 1 vale 1/n.
    """
    return float(np.exp(log_eppf_dirichlet(counts, alpha)))


def eppf_pitman_yor(counts, alpha, sigma):
    """
    EPPF del proceso Pitman-Yor (probabilidad, no log).

    Con sigma = 0 coincide con ``eppf_dirichlet``.
    """
    return float(np.exp(log_eppf_pitman_yor(counts, alpha, sigma)))
