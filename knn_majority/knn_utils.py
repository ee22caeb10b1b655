import heapq
import numbers
from collections import Counter, namedtuple

import numpy as np


# 0- Errors

class KNNError(Exception):
    """Base class for every error raised while classifying."""


class DimensionMismatch(KNNError, ValueError):
    pass


class EmptyTrainingSet(KNNError, ValueError):
    pass


class InvalidK(KNNError, ValueError):
    pass


class UnlabeledTrainingPoint(KNNError, ValueError):
    pass


# 1- Data Types

class Point(namedtuple("Point", ["features", "label"])):
    """Feature vector plus label. A query point has no label (None)."""
    __slots__ = ()

    def __new__(cls, features, label=None):
        return super().__new__(cls, tuple(float(f) for f in features), label)


# Transient (distance, input position, label) triple; the position keeps
# equal distances in input order inside the heap.
Neighbor = namedtuple("Neighbor", ["distance", "index", "label"])


# 2- Distance Calculation

def _features(point):
    return point.features if isinstance(point, Point) else point


def calculate_distance(vector1, vector2):
    a = np.asarray(_features(vector1), dtype=np.float64)
    b = np.asarray(_features(vector2), dtype=np.float64)
    if a.shape != b.shape:
        raise DimensionMismatch(f"cannot compare vectors of length {a.size} and {b.size}")
    return float(np.sqrt(np.sum((a - b) ** 2)))


# 3- Neighbor Selection

def nearest_neighbors(training, query, k):
    """
    Return the k training neighbors closest to query, nearest first.
    Fewer than k are returned when the training set is smaller.
    """
    heap = []
    for i, point in enumerate(training):
        dist = calculate_distance(query, point)
        heapq.heappush(heap, Neighbor(dist, i, point.label))

    # Pop the k smallest distances
    return [heapq.heappop(heap) for _ in range(min(k, len(heap)))]


# 4- Vote

def tally_votes(labels):
    return Counter(labels)


def majority_label(labels):
    """Most frequent label; ties go to the lexicographically smallest one (compared as text)."""
    vote = tally_votes(labels)
    if not vote:
        raise EmptyTrainingSet("no neighbors to vote on")
    best = max(vote.values())
    return min((label for label, count in vote.items() if count == best), key=str)


# 5- KNN Prediction

def classify(training, query, k):
    training = list(training)
    if not training:
        raise EmptyTrainingSet("training set is empty")
    if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k < 1:
        raise InvalidK(f"k must be a positive integer, got {k!r}")
    for i, point in enumerate(training):
        if point.label is None:
            raise UnlabeledTrainingPoint(f"training point {i} has no label")

    # k larger than the training set selects every point
    k = min(int(k), len(training))

    k_nearest = nearest_neighbors(training, query, k)
    return majority_label([neighbor.label for neighbor in k_nearest])


def classify_many(training, queries, k):
    training = list(training)
    return [classify(training, query, k) for query in queries]
