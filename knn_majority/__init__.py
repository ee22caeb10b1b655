from knn_majority.knn_utils import (
    DimensionMismatch,
    EmptyTrainingSet,
    InvalidK,
    KNNError,
    Point,
    UnlabeledTrainingPoint,
    calculate_distance,
    classify,
    classify_many,
)
