"""Linear regression of CPU performance by the normal equations."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from linsolve.linear_system import LinearSystem
from linsolve.matrix import Matrix
from linsolve.vector import Vector

NUM_FEATURES = 6
TRAIN_RATIO = 0.8
DEFAULT_SEED = 42
DEFAULT_DATA = "data/machine.data"

_SKIPPED_COLUMNS = 2


@dataclass
class Dataset:
    """Rows of predictive features with one target value per row."""

    features: list[tuple[float, ...]] = field(default_factory=list)
    targets: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.features) != len(self.targets):
            raise ValueError("features and targets must have the same length")

    def __len__(self) -> int:
        return len(self.targets)


def parse_line(line: str) -> tuple[tuple[float, ...], float]:
    """Parse one record: vendor, model, six features, then the target."""
    fields = line.strip().split(",")
    needed = _SKIPPED_COLUMNS + NUM_FEATURES + 1
    if len(fields) < needed:
        raise ValueError(f"expected at least {needed} fields, got {len(fields)}")
    start = _SKIPPED_COLUMNS
    features = tuple(float(v) for v in fields[start:start + NUM_FEATURES])
    target = float(fields[start + NUM_FEATURES])
    return features, target


def load_data(path: str | Path) -> Dataset:
    """Read a comma-separated data file, ignoring blank lines."""
    dataset = Dataset()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            features, target = parse_line(line)
            dataset.features.append(features)
            dataset.targets.append(target)
    return dataset


def split_dataset(
    dataset: Dataset, train_ratio: float = TRAIN_RATIO, seed: int = DEFAULT_SEED
) -> tuple[Dataset, Dataset]:
    """Shuffle the rows and split them into training and test sets."""
    order = list(range(len(dataset)))
    random.Random(seed).shuffle(order)
    cut = int(len(dataset) * train_ratio)

    def subset(indices: Iterable[int]) -> Dataset:
        chosen = list(indices)
        return Dataset(
            [dataset.features[i] for i in chosen],
            [dataset.targets[i] for i in chosen],
        )

    return subset(order[:cut]), subset(order[cut:])


def fit_weights(features: Sequence[Sequence[float]], targets: Sequence[float]) -> Vector:
    """Return least-squares weights from the normal equations."""
    a = Matrix.from_rows(features)
    b = Vector(targets)
    at = a.transpose()
    return LinearSystem(at * a, at * b).solve()


def predict(features: Iterable[Sequence[float]], weights: Vector) -> Vector:
    """Return the weighted sum of each feature row."""
    def row_value(row: Sequence[float]) -> float:
        if len(row) != len(weights):
            raise ValueError(
                f"feature row has {len(row)} values but there are {len(weights)} weights"
            )
        return sum(x * w for x, w in zip(row, weights))

    return Vector(row_value(row) for row in features)


def compute_rmse(predicted: Vector, actual: Vector) -> float:
    """Return the root mean square difference of two equally long vectors."""
    if len(predicted) != len(actual):
        raise ValueError("predicted and actual values differ in length")
    if not len(predicted):
        raise ValueError("cannot compute RMSE of no values")
    diff = predicted - actual
    return math.sqrt(diff.dot(diff) / len(diff))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Fit a linear model of CPU performance and report test RMSE."
    )
    parser.add_argument("data", nargs="?", default=DEFAULT_DATA, help="data file")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--train-ratio", type=float, default=TRAIN_RATIO)
    args = parser.parse_args(argv)

    dataset = load_data(args.data)
    train, test = split_dataset(dataset, args.train_ratio, args.seed)
    print(f"Total samples: {len(dataset)}")
    print(f"Training samples: {len(train)}")

    weights = fit_weights(train.features, train.targets)
    print("Weights:")
    print(weights)

    predictions = predict(test.features, weights)
    rmse = compute_rmse(predictions, Vector(test.targets))

    print("Linear Regression Weights:")
    for i, w in enumerate(weights, start=1):
        print(f"x{i} = {w:g}")
    print(f"\nTest RMSE = {rmse:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())