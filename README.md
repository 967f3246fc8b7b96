# linsolve

Small linear algebra in pure Python, with no dependencies.

## What it provides

- `linsolve.vector.Vector` is a dense vector of floats. You can build it from a size, which gives zeros, or from an iterable of numbers.
  - `v[i]` reads and writes with zero-based indices.
  - `v(i)` reads with one-based indices.
  - An out-of-range index raises `IndexError`.
  - It supports unary `+` and `-`, `+` and `-` between vectors of equal size, and multiplication by a scalar on either side.
  - It also has `==`, `dot`, `copy` and iteration.
  - Vectors of different sizes raise `ValueError`.
- `linsolve.matrix.Matrix` is a dense matrix of floats with one-based indices, as in `m[i, j]`.
  - You can build it as `Matrix(rows, cols)`, which gives zeros, with `Matrix.from_rows(...)`, or with `Matrix.identity(n)`.
  - It has the properties `num_rows` and `num_cols`. `rows()` returns a copy of the entries.
  - It supports `+`, `-`, negation, scaling, and the matrix–matrix and matrix–vector products (`*`).
  - It also has `copy`, `transpose`, `determinant`, `inverse` and `pseudo_inverse`. `pseudo_inverse` is for matrices of full rank.
  - `inverse` raises `linsolve.matrix.SingularMatrixError` for a singular matrix. `determinant` returns `0.0` for one.
- `linsolve.linear_system.LinearSystem(a, b)` solves a square system `A x = b` by Gaussian elimination with partial pivoting.
  - It copies its inputs.
  - A singular matrix raises `SingularMatrixError`.
- `linsolve.linear_system.PosSymLinSystem(a, b)` solves a symmetric positive-definite system by the conjugate gradient method.
  - A matrix that is not symmetric raises `ValueError`.
- `linsolve.regularized.LinearSystemRegularized(a, b, lam=0.0)` solves a system of any shape.
  - An overdetermined or square system is solved as `(AᵀA + λI)⁻¹Aᵀb`.
  - An underdetermined system is solved as `Aᵀ(AAᵀ + λI)⁻¹b`.
- `linsolve.regression` fits a linear model by the normal equations. It provides `parse_line`, `load_data`, `Dataset`, `split_dataset`, `fit_weights`, `predict`, `compute_rmse` and the `main` command.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from linsolve.matrix import Matrix
from linsolve.vector import Vector
from linsolve.linear_system import LinearSystem

a = Matrix.from_rows([[2, 1], [1, 3]])
b = Vector([4, 7])
x = LinearSystem(a, b).solve()
print(x)          # 1 2
```

Regularized least squares on an overdetermined system:

```python
from linsolve.regularized import LinearSystemRegularized

a = Matrix.from_rows([[1, 0], [0, 1], [1, 1]])
b = Vector([1, 2, 3])
print(LinearSystemRegularized(a, b, 0.1).solve())
```

## Regression command

```
linsolve-regression [DATA] [--seed SEED] [--train-ratio RATIO]
```

`DATA` is a comma-separated file. Each line holds:

- a vendor name,
- a model name,
- six numeric features,
- the target performance value.

Blank lines are ignored. The path defaults to `data/machine.data`.

The command works in these steps:

1. It shuffles the rows with the given seed (default 42).
2. It trains on the leading fraction of the rows (default 0.8).
3. It prints the sample counts and the fitted weights.
4. It prints the root mean square error on the remaining rows.

## Limitations

- No data file comes with the package. Supply your own file in the format above.
- The fitted model has no intercept term.
- All arithmetic is plain Python floats. The package is meant for small systems, not for speed.