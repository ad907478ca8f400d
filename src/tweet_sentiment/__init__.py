"""Three-class sentiment analysis of labeled tweets.

Cleans and lemmatizes tweets, splits them into train/test sets, trains a
classifier and reports a confusion matrix. See `SentimentPipeline`.
"""

from .datasets import SentimentDataset, canonicalize_labels, load_labeled_tweets
from .evaluation import ConfusionMatrix, EvaluationReport, evaluate
from .labels import Label, canonicalize_label
from .pipeline import PipelineContext, SentimentPipeline
from .sampling import DatasetSplit, split_dataset
from .text_cleaning import normalize_text

__all__ = [
    "ConfusionMatrix",
    "DatasetSplit",
    "EvaluationReport",
    "Label",
    "PipelineContext",
    "SentimentDataset",
    "SentimentPipeline",
    "canonicalize_label",
    "canonicalize_labels",
    "evaluate",
    "load_labeled_tweets",
    "normalize_text",
    "split_dataset",
]
