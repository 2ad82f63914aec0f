"""
Momentos de los modelos de muestreo de especies (Dirichlet / Pitman-Yor).

- Número esperado de bloques E[K_n]
- Número esperado de bloques de tamaño r, E[M_{r,n}]
- Extrapolación del número de bloques tras m observaciones adicionales

Las funciones están vectorizadas en su primer argumento: un escalar devuelve
``float`` y un array devuelve ``np.ndarray``.
"""

import numpy as np
from scipy.special import gammaln, digamma

from ..utils.validation import (
    InvalidParameter,
    _validate_nonnegative_int,
    _validate_pitman_yor,
)

# Por debajo de este sigma se usa la forma cerrada del proceso de Dirichlet
SIGMA_TOL = 1e-6


def _wrap(value, out):
    if np.ndim(value) == 0:
        return float(np.asarray(out).reshape(-1)[0])
    return np.asarray(out, dtype=float).reshape(np.shape(value))


def _is_dirichlet(alpha, sigma):
    return sigma < SIGMA_TOL and alpha > 0


def _single_int(value, name):
    arr = _validate_nonnegative_int(value, name)
    if arr.size != 1:
        raise InvalidParameter(f"{name} debe ser un escalar")
    return int(arr.reshape(-1)[0])


def expected_clusters(n, alpha, sigma=0.0):
    """
    Número esperado de bloques distintos en una muestra de tamaño n.

    Parameters
    ----------
    n : int or array-like of int
        Tamaño(s) muestral(es), n >= 0
    alpha : float
        Concentración, alpha > -sigma
    sigma : float
        Descuento, 0 <= sigma < 1. Con sigma = 0 es el proceso de Dirichlet.

    Returns
    -------
    float or np.ndarray
        E[K_n]
    """
    n_arr = _validate_nonnegative_int(n, "n").astype(float)
    alpha, sigma = _validate_pitman_yor(alpha, sigma)

    if _is_dirichlet(alpha, sigma):
        out = alpha * (digamma(alpha + n_arr) - digamma(alpha))
    else:
        log_ratio = (gammaln(alpha + sigma + n_arr) - gammaln(alpha + sigma)
                     - gammaln(alpha + n_arr) + gammaln(alpha + 1))
        out = np.exp(log_ratio) / sigma - alpha / sigma

    out = np.where(n_arr == 0, 0.0, out)
    return _wrap(n, out)


def expected_block_counts(r, n, alpha, sigma=0.0):
    """
    Número esperado de bloques de tamaño r entre n elementos, E[M_{r,n}].

        E[M_{r,n}] = C(n, r) (1-σ)_{r-1} (α+σ)_{n-r} / (α+1)_{n-1}

    Se cumple Σ_r r·E[M_{r,n}] = n y Σ_r E[M_{r,n}] = E[K_n].

    Parameters
    ----------
    r : int or array-like of int
        Tamaño(s) de bloque, 1 <= r <= n
    n : int
        Tamaño muestral, n >= 1
    alpha : float
        Concentración, alpha > -sigma
    sigma : float
        Descuento, 0 <= sigma < 1

    Returns
    -------
    float or np.ndarray
    """
    n = _single_int(n, "n")
    if n < 1:
        raise InvalidParameter(f"n debe ser >= 1, se recibió {n}")
    r_arr = _validate_nonnegative_int(r, "r").astype(float)
    if np.any(r_arr < 1) or np.any(r_arr > n):
        raise InvalidParameter(f"r debe estar entre 1 y n = {n}")
    alpha, sigma = _validate_pitman_yor(alpha, sigma)

    log_choose = gammaln(n + 1) - gammaln(r_arr + 1) - gammaln(n - r_arr + 1)
    out = (log_choose
           + gammaln(r_arr - sigma) - gammaln(1 - sigma)
           + gammaln(alpha + sigma + n - r_arr) - gammaln(alpha + sigma)
           + gammaln(alpha + 1) - gammaln(alpha + n))
    return _wrap(r, np.exp(out))


def extrapolate_clusters(m, n_clusters, n, alpha, sigma=0.0):
    """
    Número esperado de bloques tras m observaciones adicionales.

    Dada una muestra de n elementos con ``n_clusters`` bloques observados,
    devuelve E[K_{n+m} | K_n = n_clusters]. Con m = 0 devuelve n_clusters.

    Parameters
    ----------
    m : int or array-like of int
        Observaciones adicionales, m >= 0
    n_clusters : int
        Bloques observados K, 0 <= K <= n (K >= 1 si n >= 1)
    n : int
        Tamaño de la muestra observada
    alpha, sigma : float
        Parámetros del proceso

    Returns
    -------
    float or np.ndarray
    """
    K = _single_int(n_clusters, "n_clusters")
    n = _single_int(n, "n")
    if K > n or (n > 0 and K == 0):
        raise InvalidParameter(
            f"n_clusters debe cumplir 1 <= K <= n, se recibió K={K}, n={n}"
        )
    m_arr = _validate_nonnegative_int(m, "m").astype(float)
    alpha, sigma = _validate_pitman_yor(alpha, sigma)

    # Sin muestra previa coincide con el número esperado a priori
    if n == 0:
        return expected_clusters(m, alpha, sigma)

    if _is_dirichlet(alpha, sigma):
        out = K + alpha * (digamma(alpha + n + m_arr) - digamma(alpha + n))
    else:
        log_ratio = (gammaln(alpha + n + sigma + m_arr) - gammaln(alpha + n + sigma)
                     - gammaln(alpha + n + m_arr) + gammaln(alpha + n))
        out = (K + alpha / sigma) * (np.exp(log_ratio) - 1) + K

    return _wrap(m, out)
