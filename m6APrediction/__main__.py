#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
m6APrediction Main Module

Command-line entry point. Provides the following subcommands:
- predict: Predict m6A status for every site of a feature table.
- single: Predict m6A status for one site given on the command line.
- encode: Write the positional encoding of the DNA_5mer column.
- validate: Report values outside the closed categorical domains.
"""

import os
import sys
import argparse
import logging
from datetime import datetime

from . import __version__
from .constants import DEFAULT_THRESHOLD, DNA_5MER, STATUS_COLUMN, POSITIVE
from .exceptions import M6APredictionError

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)
logger = logging.getLogger('m6APrediction')

DEFAULT_OUTPUT_DIR = 'm6APrediction_output'
SEP_HELP = 'Field separator for input and output tables, e.g. "," or "tab" (default: inferred from file extension)'


def _parse_sep(value):
    if value is None:
        return None
    return '\t' if value in ('tab', '\\t') else value


def build_parser():
    parser = argparse.ArgumentParser(description=f'm6APrediction v{__version__}: m6A methylation site prediction with a pre-trained classifier')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Create the parser for the "predict" command
    predict_parser = subparsers.add_parser('predict', help='Predict m6A status for every site in a feature table')
    predict_parser.add_argument('--model', type=str, required=True,
                                help='Path to the trained classifier (joblib file)')
    predict_parser.add_argument('--features', type=str, required=True,
                                help='Path to features CSV/TSV file')
    predict_parser.add_argument('--output', type=str, default=None,
                                help=f'Path to prediction table (default: {DEFAULT_OUTPUT_DIR}/m6A_predictions.csv)')
    predict_parser.add_argument('--threshold', type=float, default=DEFAULT_THRESHOLD,
                                help=f'Probability cutoff; sites with prob > threshold are Positive (default: {DEFAULT_THRESHOLD})')
    predict_parser.add_argument('--sep', type=str, default=None, help=SEP_HELP)

    # Create the parser for the "single" command
    single_parser = subparsers.add_parser('single', help='Predict m6A status for a single site')
    single_parser.add_argument('--model', type=str, required=True,
                               help='Path to the trained classifier (joblib file)')
    single_parser.add_argument('--gc-content', type=float, required=True, help='GC content')
    single_parser.add_argument('--rna-type', type=str, required=True,
                               help='RNA type: mRNA, lincRNA, lncRNA or pseudogene')
    single_parser.add_argument('--rna-region', type=str, required=True,
                               help="RNA region: CDS, intron, 3'UTR or 5'UTR")
    single_parser.add_argument('--exon-length', type=float, required=True, help='Exon length')
    single_parser.add_argument('--distance-to-junction', type=float, required=True,
                               help='Distance to the nearest exon-intron junction')
    single_parser.add_argument('--evolutionary-conservation', type=float, required=True,
                               help='Conservation score')
    single_parser.add_argument('--dna-5mer', type=str, required=True, help='DNA 5-mer centred on the site')
    single_parser.add_argument('--threshold', type=float, default=DEFAULT_THRESHOLD,
                               help=f'Probability cutoff (default: {DEFAULT_THRESHOLD})')

    # Create the parser for the "encode" command
    encode_parser = subparsers.add_parser('encode', help='Encode the DNA_5mer column into positional features')
    encode_parser.add_argument('--features', type=str, required=True,
                               help='Path to features CSV/TSV file')
    encode_parser.add_argument('--output', type=str, default=None,
                               help=f'Path to encoded table (default: {DEFAULT_OUTPUT_DIR}/DNA_5mer_encoding.csv)')
    encode_parser.add_argument('--sep', type=str, default=None, help=SEP_HELP)

    # Create the parser for the "validate" command
    validate_parser = subparsers.add_parser('validate', help='Report out-of-domain values in a feature table')
    validate_parser.add_argument('--features', type=str, required=True,
                                 help='Path to features CSV/TSV file')
    validate_parser.add_argument('--sep', type=str, default=None, help=SEP_HELP)

    return parser


def main(argv=None):
    """Main entry point for m6APrediction"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    sep = _parse_sep(getattr(args, 'sep', None))

    try:
        start_time = datetime.now()

        if args.command == 'predict':
            from .dataset import read_feature_table, write_prediction_table
            from .model import load_model
            from .predict import predict_batch

            output_file = args.output or os.path.join(DEFAULT_OUTPUT_DIR, 'm6A_predictions.csv')

            logger.info("Predicting m6A status with the following parameters:")
            logger.info(f"- Features: {args.features}")
            logger.info(f"- Model: {args.model}")
            logger.info(f"- Output: {output_file}")
            logger.info(f"- Threshold: {args.threshold}")

            model = load_model(args.model)
            feature_df = read_feature_table(args.features, sep=sep)
            results = predict_batch(model, feature_df, threshold=args.threshold)
            write_prediction_table(results, output_file, sep=sep)

            num_positive = int((results[STATUS_COLUMN] == POSITIVE).sum())
            logger.info(f"Prediction completed for {len(results)} sites ({num_positive} Positive)")

        elif args.command == 'single':
            from .model import load_model
            from .predict import predict_one

            model = load_model(args.model)
            prob, status = predict_one(
                model,
                gc_content=args.gc_content,
                rna_type=args.rna_type,
                rna_region=args.rna_region,
                exon_length=args.exon_length,
                distance_to_junction=args.distance_to_junction,
                evolutionary_conservation=args.evolutionary_conservation,
                dna_5mer=args.dna_5mer,
                threshold=args.threshold,
            )
            print(f"predicted_m6A_prob\t{prob:.4f}")
            print(f"predicted_m6A_status\t{status}")

        elif args.command == 'encode':
            from .dataset import read_feature_table, write_prediction_table
            from .encoding import encode_sequences

            output_file = args.output or os.path.join(DEFAULT_OUTPUT_DIR, 'DNA_5mer_encoding.csv')
            feature_df = read_feature_table(args.features, sep=sep)
            encoded = encode_sequences(feature_df[DNA_5MER])
            write_prediction_table(encoded, output_file, sep=sep)

        elif args.command == 'validate':
            from .dataset import read_feature_table
            from .encoding import check_feature_domains

            feature_df = read_feature_table(args.features, sep=sep)
            report = check_feature_domains(feature_df)
            if report.empty:
                print(f"All {len(feature_df)} sites are within the expected domains")
            else:
                print(f"{len(report)} out-of-domain values found:")
                print(report.to_string(index=False))

        elapsed = datetime.now() - start_time
        logger.info(f"Finished '{args.command}' in {elapsed.total_seconds():.2f}s")

    except (M6APredictionError, FileNotFoundError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
