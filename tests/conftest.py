import math

import matplotlib
import pytest

matplotlib.use("Agg")


def integer_partitions(n, max_part=None):
    """Particiones enteras de n en orden no creciente."""
    if max_part is None:
        max_part = n
    if n == 0:
        yield []
        return
    for first in range(min(n, max_part), 0, -1):
        for rest in integer_partitions(n - first, first):
            yield [first] + rest


def n_set_partitions(counts):
    """Número de particiones de conjunto de [n] con esos tamaños de bloque."""
    n = sum(counts)
    out = math.factorial(n)
    for c in counts:
        out //= math.factorial(c)
    for size in set(counts):
        out //= math.factorial(counts.count(size))
    return out


@pytest.fixture
def partitions_of():
    def _partitions(n):
        return [(p, n_set_partitions(p)) for p in integer_partitions(n)]
    return _partitions
