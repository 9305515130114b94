#!/usr/bin/env python3
"""
Example: m6A Site Prediction with m6aprediction

This example demonstrates:
- Reading the bundled example feature table
- Per-position encoding of DNA 5-mers
- Batch and single-site prediction with a serialized classifier

Usage:
    python m6a_prediction.py [path/to/rf_fit.joblib]
"""

import sys

from m6aprediction import (
    dna_encoding,
    example_data_path,
    load_model,
    prediction_multiple,
    prediction_single,
    read_feature_table,
)


def demo_encoding():
    """Demonstrate 5-mer encoding."""
    print("\n" + "=" * 60)
    print("5-MER ENCODING")
    print("=" * 60)

    kmers = ["GGACA", "AGACT", "TGNCC"]
    seq_df = dna_encoding(kmers)
    print(f"\nInput 5-mers: {kmers}")
    print(seq_df)
    print("\n  (N is outside A/T/C/G and is left unmapped)")


def demo_prediction(model_path):
    """Predict the example table and one hand-entered site."""
    print("\n" + "=" * 60)
    print("PREDICTION")
    print("=" * 60)

    ml_fit = load_model(model_path)
    feature_df = read_feature_table(example_data_path())

    predictions = prediction_multiple(ml_fit, feature_df)
    print(predictions[["DNA_5mer", "predicted_m6A_prob", "predicted_m6A_status"]])

    single = prediction_single(
        ml_fit,
        gc_content=0.5,
        RNA_type="mRNA",
        RNA_region="CDS",
        exon_length=10,
        distance_to_junction=8,
        evolutionary_conservation=0.5,
        DNA_5mer="GGACA",
    )
    print(f"\nSingle site GGACA: {single.predicted_m6A_prob:.3f} ({single.predicted_m6A_status})")


def main():
    print("=" * 60)
    print("m6aprediction Demo")
    print("=" * 60)

    demo_encoding()
    if len(sys.argv) > 1:
        demo_prediction(sys.argv[1])
    else:
        print("\nPass a serialized classifier to run the prediction demo.")


if __name__ == "__main__":
    main()
