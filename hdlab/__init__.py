"""Small experiments: factorial, grids, finite-difference stencils, Runge-Kutta stages, polyline output, property files, lottery and dice draws, and type-erasure demos."""

__version__ = "0.1.0"