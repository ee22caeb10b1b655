import numpy as np

# 1- Accuracy over labels
def label_accuracy(true_labels, predicted_labels):
    correct = sum(1 for t, p in zip(true_labels, predicted_labels) if t == p)
    total = len(true_labels)
    accuracy = correct / total if total > 0 else 0
    return correct, total, accuracy

# 2- Confusion matrix (rows = true label, columns = predicted label)
def confusion_matrix(true_labels, predicted_labels, labels=None):
    if labels is None:
        labels = sorted(set(true_labels) | set(predicted_labels))
    index = {label: i for i, label in enumerate(labels)}
    matrix = np.zeros((len(labels), len(labels)), dtype=int)
    for t, p in zip(true_labels, predicted_labels):
        matrix[index[t]][index[p]] += 1
    return matrix, list(labels)

# 3- Precision per class
def precision_per_class(conf_matrix):
    num_classes = conf_matrix.shape[0]
    precisions = []
    for c in range(num_classes):
        tp = conf_matrix[c][c]
        fp = np.sum(conf_matrix[:, c]) - tp
        precision = tp / (tp + fp) if (tp + fp) > 0 else 0
        precisions.append(precision)
    return precisions

# 4- Recall per class
def recall_per_class(conf_matrix):
    num_classes = conf_matrix.shape[0]
    recalls = []
    for c in range(num_classes):
        tp = conf_matrix[c][c]
        fn = np.sum(conf_matrix[c, :]) - tp
        recall = tp / (tp + fn) if (tp + fn) > 0 else 0
        recalls.append(recall)
    return recalls

# 5- Display all metrics
def display_metrics(true_labels, predicted_labels):
    correct, total, acc = label_accuracy(true_labels, predicted_labels)
    print(f"\n{'='*50}")
    print(f"METRICS")
    print(f"{'='*50}")
    print(f"Accuracy: {correct}/{total} = {acc*100:.1f}%")

    conf, labels = confusion_matrix(true_labels, predicted_labels)
    width = max([len(str(label)) for label in labels] + [3])
    print(f"\nConfusion Matrix:")
    print(f"  {'':>{width}} | " + ' '.join(f"{str(label):>{width}}" for label in labels))
    print(f"  {'-' * width}-+-" + '-' * ((width + 1) * len(labels)))
    for i, label in enumerate(labels):
        row = ' '.join(f"{conf[i][j]:>{width}d}" for j in range(len(labels)))
        print(f"  {str(label):>{width}} | {row}")

    precisions = precision_per_class(conf)
    print(f"\nPrecision per class:")
    for label, p in zip(labels, precisions):
        print(f"  {label}: {p*100:.1f}%")

    recalls = recall_per_class(conf)
    print(f"\nRecall per class:")
    for label, r in zip(labels, recalls):
        print(f"  {label}: {r*100:.1f}%")

    print(f"{'='*50}")
