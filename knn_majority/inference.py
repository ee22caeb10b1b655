import argparse
import os
import subprocess
import sys

import matplotlib.pyplot as plt

from knn_majority.data_utils import DataFormatError, calculate_k, load_points, points_to_arrays
from knn_majority.knn_utils import KNNError, Point, classify, classify_many
from knn_majority.metrics import display_metrics

# ============== CONFIGURATION ==============
DATA_PATH = os.path.join("data", "points.csv")
DEFAULT_QUERY = (4.5, 8.0)


def clear_terminal():
    command = ["cmd", "/C", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError as e:
        print(f"[WARNING] Cannot clear terminal: {e}")


def plot_points(training, query, predicted):
    """Scatter the first two features of the training set, one colour per label, with the query on top."""
    X, y = points_to_arrays(training)
    plt.figure(figsize=(6, 6))
    for label in sorted(set(y)):
        mask = y == label
        plt.scatter(X[mask, 0], X[mask, 1], label=str(label))
    plt.scatter([query.features[0]], [query.features[1]], marker="*", s=250, c="black",
                label=f"query -> {predicted}")
    plt.title(f"Predicted: {predicted}")
    plt.legend()
    plt.show()


def evaluate(training, test_points, k):
    """Classify every labelled test point and print the metrics report."""
    predicted = classify_many(training, test_points, k)
    true_labels = [p.label for p in test_points]

    print(f"\n{'#'*50}")
    print(f"# EVALUATION — {len(test_points)} points, k={k}")
    print(f"{'#'*50}")
    display_metrics(true_labels, predicted)
    return predicted


def inference(train_path=DATA_PATH, query=DEFAULT_QUERY, k=None, test_path=None, plot=False):
    """
    Classify one query point against the training set in train_path.
    k defaults to ceil(sqrt(training set size)).
    """

    # ============== 1. Load training data ==============
    training = load_points(train_path)
    print(f"Training data loaded: {len(training)} points from {train_path}")

    # ============== 2. Choose k ==============
    if k is None:
        k = calculate_k(len(training))
    elif training and k > len(training):
        print(f"[WARNING] k={k} exceeds the training set size, using all {len(training)} points")
    print(f"k = {k}")

    # ============== 3. Classify ==============
    query_point = Point(query)
    predicted = classify(training, query_point, k)
    print(f"Predicted label for test point {list(query_point.features)} is {predicted}")

    # ============== 4. Evaluate ==============
    if test_path is not None:
        evaluate(training, load_points(test_path), k)

    # ============== 5. Display ==============
    if plot:
        if len(query_point.features) < 2:
            print("[WARNING] Plot needs at least two features, skipping")
        else:
            plot_points(training, query_point, predicted)

    return predicted


def build_parser():
    parser = argparse.ArgumentParser(description="k-nearest-neighbors majority vote classifier")
    parser.add_argument("--train", default=DATA_PATH,
                        help="CSV training set with a header row, label in the last column")
    parser.add_argument("--query", type=float, nargs="+", default=list(DEFAULT_QUERY),
                        help="Feature values of the point to classify")
    parser.add_argument("--k", type=int, default=None,
                        help="Number of neighbors (default: ceil(sqrt(training set size)))")
    parser.add_argument("--test", default=None,
                        help="Labelled CSV to evaluate the classifier on")
    parser.add_argument("--plot", action="store_true", help="Plot the training set and the query point")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the terminal first")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not args.no_clear:
        clear_terminal()

    try:
        inference(train_path=args.train, query=args.query, k=args.k,
                  test_path=args.test, plot=args.plot)
    except (KNNError, DataFormatError, OSError) as e:
        print(f"[ERROR] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
