"""
Command-line entry point.

Usage:
    tweet-sentiment 500            # load 500 tweets, train, evaluate, then chat
    python -m tweet_sentiment 500
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import PipelineConfig
from .evaluation import format_report
from .pipeline import SentimentPipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tweet-sentiment",
        description="Train and evaluate a three-class sentiment model on labeled tweets.",
    )
    parser.add_argument(
        "num_tweets",
        type=int,
        help="Number of tweets to load from the dataset",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, config: Optional[PipelineConfig] = None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    pipeline = SentimentPipeline(config)
    try:
        context = pipeline.run(args.num_tweets)
    except Exception:
        logger.exception("Pipeline run failed")
        raise

    print(format_report(context.report))
    pipeline.interact(context)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
