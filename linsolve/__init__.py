"""Dense vectors, matrices, linear system solvers and a least-squares regression tool."""

__version__ = "0.1.0"
__all__ = ["vector", "matrix", "linear_system", "regularized", "regression"]