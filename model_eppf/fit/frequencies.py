# frequencies.py

import numpy as np

from ..utils.validation import InvalidParameter, _as_integer_array, _validate_counts


def partition_summary(counts):
    """
    Devuelve (n, k): número de elementos y número de bloques de la partición.
    """
    counts = _validate_counts(counts)
    return int(counts.sum()), int(counts.size)


def _validate_abundances(abundances):
    arr = np.asarray(abundances)

    if arr.ndim not in (1, 2):
        raise InvalidParameter("abundances debe ser un vector 1D o una matriz 2D")
    if arr.size == 0:
        raise InvalidParameter("abundances no puede estar vacío")

    arr = _as_integer_array(arr, "abundances")
    if np.any(arr < 0):
        raise InvalidParameter("abundances no puede contener valores negativos")
    if arr.max() == 0:
        raise InvalidParameter("abundances debe contener al menos una especie observada")

    return arr


def frequency_of_frequencies(abundances, relative=False):
    """
    Tabla de frecuencias de frecuencias M_r.

    La entrada r-1 cuenta cuántas especies tienen abundancia exactamente r
    (las abundancias nulas se ignoran).

    Parameters
    ----------
    abundances : array-like of int
        Vector de abundancias, o matriz con una muestra por fila
    relative : bool
        Si True divide cada columna por el número de especies observadas
        en la muestra correspondiente

    Returns
    -------
    np.ndarray
        Shape (max_abundance,) para un vector, (max_abundance, n_muestras)
        para una matriz
    """
    arr = _validate_abundances(abundances)
    is_vector = arr.ndim == 1
    rows = arr.reshape(1, -1) if is_vector else arr

    K = int(rows.max())
    tab = np.zeros((K, rows.shape[0]), dtype=float if relative else np.int64)

    for i, row in enumerate(rows):
        observed = row[row > 0]
        freq = np.bincount(observed, minlength=K + 1)[1:]
        if relative:
            tab[:, i] = freq / observed.size if observed.size else 0.0
        else:
            tab[:, i] = freq

    return tab[:, 0] if is_vector else tab
