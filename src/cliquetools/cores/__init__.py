from .degeneracy import (
    CoreDecomposition,
    core_decomposition,
    core_numbers,
    degeneracy,
    validate_ordering,
)

__all__ = [
    "CoreDecomposition",
    "core_decomposition",
    "core_numbers",
    "degeneracy",
    "validate_ordering",
]
