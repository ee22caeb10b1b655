import numpy as np
import pandas as pd

from knn_majority.knn_utils import Point


class DataFormatError(ValueError):
    pass


# 1- Loading Functions

def load_points(filename):
    """
    Read labelled points from a delimited text file with a header row.
    Every column but the last is a numeric feature, the last is the label,
    kept exactly as written.
    """
    try:
        df = pd.read_csv(filename, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise DataFormatError(f"{filename}: file is empty") from e
    except pd.errors.ParserError as e:
        raise DataFormatError(f"{filename}: {e}") from e

    if df.shape[1] < 2:
        raise DataFormatError(f"{filename}: expected at least one feature column and a label column")

    raw = df.iloc[:, :-1].apply(lambda col: col.str.strip())
    blank = (raw == "").any(axis=1).to_numpy()
    if blank.any():
        row = int(np.where(blank)[0][0])
        raise DataFormatError(f"{filename}: missing feature value on data row {row + 1}")

    try:
        features = raw.astype(np.float64).to_numpy()
    except ValueError as e:
        raise DataFormatError(f"{filename}: non-numeric feature value ({e})") from e

    if np.isnan(features).any():
        row = int(np.where(np.isnan(features).any(axis=1))[0][0])
        raise DataFormatError(f"{filename}: missing feature value on data row {row + 1}")

    labels = df.iloc[:, -1]
    blank = (labels.str.strip() == "").to_numpy()
    if blank.any():
        row = int(np.where(blank)[0][0])
        raise DataFormatError(f"{filename}: missing label on data row {row + 1}")

    return [Point(vector, label) for vector, label in zip(features, labels)]


def points_to_arrays(points):
    """Split points into a feature matrix X [n, d] and a label vector y [n]."""
    X = np.array([p.features for p in points], dtype=np.float64)
    y = np.array([p.label for p in points], dtype=object)
    return X, y


# 2- k Heuristic

def calculate_k(n_points):
    # ceil(sqrt(n)), at least 1
    return max(1, int(np.ceil(np.sqrt(n_points))))
