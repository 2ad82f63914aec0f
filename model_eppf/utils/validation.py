# validation.py
"""
Validación de particiones y parámetros para los modelos de especies.

Todas las funciones públicas de ``model_eppf`` pasan por estas rutinas antes
de calcular nada: si un argumento está fuera de dominio se lanza
``InvalidParameter`` y no se devuelve ningún resultado parcial.
"""

import math

import numpy as np


class InvalidParameter(ValueError):
    """Parámetro fuera de dominio (alpha, sigma o tamaños de bloque)."""


def _validate_counts(counts):
    """
    Convierte ``counts`` a un vector 1D de enteros positivos.

    Parameters
    ----------
    counts : array-like
        Tamaños de los bloques de la partición.

    Returns
    -------
    np.ndarray
        Vector ``int64`` con los tamaños de bloque.

    Raises
    ------
    InvalidParameter
        Si el vector está vacío, no es 1D, contiene valores no enteros
        o algún bloque tiene tamaño <= 0.
    """
    arr = np.asarray(counts)

    if arr.ndim != 1:
        raise InvalidParameter(
            f"counts debe ser un vector 1D, se recibió shape {arr.shape}"
        )
    if arr.size == 0:
        raise InvalidParameter("counts no puede estar vacío (n = 0)")

    arr = _as_integer_array(arr, "counts")

    if np.any(arr <= 0):
        bad = arr[arr <= 0]
        raise InvalidParameter(
            f"Todos los bloques deben tener tamaño >= 1, se encontró {bad.tolist()}"
        )

    return arr


def _as_integer_array(arr, name):
    if arr.dtype == bool:
        raise InvalidParameter(f"{name} debe contener enteros, no booleanos")

    if np.issubdtype(arr.dtype, np.integer):
        return arr.astype(np.int64)

    if np.issubdtype(arr.dtype, np.floating):
        if not np.all(np.isfinite(arr)) or np.any(arr != np.floor(arr)):
            raise InvalidParameter(f"{name} debe contener valores enteros")
        return arr.astype(np.int64)

    raise InvalidParameter(f"{name} debe ser numérico, se recibió dtype {arr.dtype}")


def _validate_scalar(value, name):
    if isinstance(value, (bool, np.bool_)):
        raise InvalidParameter(f"{name} debe ser un número real")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} debe ser un número real, se recibió {value!r}")
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} debe ser finito, se recibió {value}")
    return value


def _validate_dirichlet(alpha):
    """Dominio Dirichlet: alpha > 0."""
    alpha = _validate_scalar(alpha, "alpha")
    if alpha <= 0:
        raise InvalidParameter(f"alpha debe ser > 0, se recibió {alpha}")
    return alpha


def _validate_pitman_yor(alpha, sigma):
    """Dominio Pitman-Yor: 0 <= sigma < 1 y alpha > -sigma."""
    alpha = _validate_scalar(alpha, "alpha")
    sigma = _validate_scalar(sigma, "sigma")

    if not (0 <= sigma < 1):
        raise InvalidParameter(f"sigma debe estar en [0, 1), se recibió {sigma}")
    if alpha <= -sigma:
        raise InvalidParameter(
            f"alpha debe ser > -sigma ({-sigma}), se recibió {alpha}"
        )
    return alpha, sigma


def _validate_nonnegative_int(value, name):
    """Entero >= 0 (escalar o array); devuelve un array int64."""
    arr = np.asarray(value)
    if arr.size == 0:
        raise InvalidParameter(f"{name} no puede estar vacío")
    arr = _as_integer_array(arr, name)
    if np.any(arr < 0):
        raise InvalidParameter(f"{name} debe ser >= 0")
    return arr
