#!/usr/bin/env python3
"""
Command line interface for m6A prediction.

Usage:
    # Predict every row of a feature table
    m6a-predict batch --model rf_fit.joblib --input sites.csv --output predictions.csv

    # Predict a single site
    m6a-predict single --model rf_fit.joblib --gc-content 0.5 --rna-type mRNA \\
        --rna-region CDS --exon-length 10 --distance-to-junction 8 \\
        --evolutionary-conservation 0.5 --dna-5mer GGACA
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from m6aprediction.config import PredictionConfig
from m6aprediction.io.table import read_feature_table, write_predictions
from m6aprediction.models.classifier import load_model
from m6aprediction.predict.batch import prediction_multiple
from m6aprediction.predict.single import prediction_single

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="m6a-predict",
        description="Predict m6A modification sites with a pre-trained classifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with model_path / positive_threshold / log_level",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Serialized classifier (overrides model_path from --config)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Probability above which a site is called Positive (default: 0.5)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    batch = subparsers.add_parser("batch", help="Predict every row of a CSV feature table")
    batch.add_argument("--input", type=str, required=True, help="Feature table (.csv or .csv.gz)")
    batch.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output CSV; printed to stdout when omitted",
    )

    single = subparsers.add_parser("single", help="Predict one site from feature values")
    single.add_argument("--gc-content", type=float, required=True)
    single.add_argument("--rna-type", type=str, required=True)
    single.add_argument("--rna-region", type=str, required=True)
    single.add_argument("--exon-length", type=float, required=True)
    single.add_argument("--distance-to-junction", type=float, required=True)
    single.add_argument("--evolutionary-conservation", type=float, required=True)
    single.add_argument("--dna-5mer", type=str, required=True)

    return parser


def resolve_config(args: argparse.Namespace) -> PredictionConfig:
    """Merge --config with command line overrides."""
    config = PredictionConfig.from_yaml(args.config) if args.config else PredictionConfig()
    if args.model is not None:
        config.model_path = Path(args.model)
    if args.threshold is not None:
        config.positive_threshold = args.threshold
    if args.log_level is not None:
        config.log_level = args.log_level
    return config.validate()


def run_batch(args: argparse.Namespace, config: PredictionConfig) -> None:
    ml_fit = load_model(config.model_path)
    feature_df = read_feature_table(args.input)
    predictions = prediction_multiple(ml_fit, feature_df, config.positive_threshold)

    if args.output:
        write_predictions(predictions, args.output)
    else:
        predictions.to_csv(sys.stdout, index=False)


def run_single(args: argparse.Namespace, config: PredictionConfig) -> None:
    ml_fit = load_model(config.model_path)
    result = prediction_single(
        ml_fit,
        gc_content=args.gc_content,
        RNA_type=args.rna_type,
        RNA_region=args.rna_region,
        exon_length=args.exon_length,
        distance_to_junction=args.distance_to_junction,
        evolutionary_conservation=args.evolutionary_conservation,
        DNA_5mer=args.dna_5mer,
        positive_threshold=config.positive_threshold,
    )
    print(f"predicted_m6A_prob\t{result.predicted_m6A_prob:.4f}")
    print(f"predicted_m6A_status\t{result.predicted_m6A_status}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if config.model_path is None:
        logger.error("No model given; use --model or set model_path in --config")
        return 1

    try:
        if args.command == "batch":
            run_batch(args, config)
        else:
            run_single(args, config)
    except (OSError, TypeError, ValueError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
