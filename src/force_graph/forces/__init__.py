"""
Pluggable forces for the simulation.

- Force: Abstract base defining apply(nodes, edges, bounds)
- SpringForce: Hooke's-law attraction along edges
- ManyBodyForce: Coulomb repulsion between all node pairs
"""

from .base import Force
from .many_body import ManyBodyForce
from .spring import SpringForce

__all__ = [
    "Force",
    "SpringForce",
    "ManyBodyForce",
]
