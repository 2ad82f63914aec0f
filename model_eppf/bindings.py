"""
Tabla de puntos de entrada registrados por nombre.

Cada entrada asocia el nombre público con la función y su número de
argumentos, de modo que un entorno anfitrión pueda invocar la evaluación
por nombre y recibir un ``float``.
"""

from .models.eppf import eppf_dirichlet, eppf_pitman_yor

EPPF_Dirichlet = eppf_dirichlet
EPPF_PitmanYor = eppf_pitman_yor

CALL_ENTRIES = {
    "EPPF_Dirichlet": (EPPF_Dirichlet, 2),
    "EPPF_PitmanYor": (EPPF_PitmanYor, 3),
}


def call_entry(name, *args):
    """
    Invoca el punto de entrada ``name`` con ``args``.

    Raises
    ------
    KeyError
        Si ``name`` no está registrado
    TypeError
        Si el número de argumentos no coincide con el registrado
    """
    if name not in CALL_ENTRIES:
        raise KeyError(f"Punto de entrada no registrado: {name!r}")

    func, n_args = CALL_ENTRIES[name]
    if len(args) != n_args:
        raise TypeError(
            f"{name} espera {n_args} argumentos, se recibieron {len(args)}"
        )
    return func(*args)
