import pandas as pd

from m6aprediction.features.schema import REQUIRED_FEATURES
from m6aprediction.io.table import example_data_path, read_feature_table, write_predictions
from m6aprediction.predict.batch import prediction_multiple


class TestReadFeatureTable:
    """Tests for reading feature tables."""

    def test_example_data(self, example_df):
        assert example_data_path().exists()
        assert list(example_df.columns) == REQUIRED_FEATURES
        assert len(example_df) == 10
        assert example_df.loc[0, "DNA_5mer"] == "GGACA"
        assert example_df.loc[1, "RNA_region"] == "3'UTR"

    def test_gzip(self, example_df, tmp_path):
        path = tmp_path / "sites.csv.gz"
        example_df.to_csv(path, index=False)
        pd.testing.assert_frame_equal(read_feature_table(path), example_df)

    def test_string_columns_not_coerced(self, tmp_path):
        path = tmp_path / "sites.csv"
        path.write_text(
            "gc_content,RNA_type,RNA_region,exon_length,distance_to_junction,"
            "evolutionary_conservation,DNA_5mer\n"
            "0.5,mRNA,CDS,10,8,0.5,TTTTT\n"
        )
        df = read_feature_table(path)
        assert df.loc[0, "DNA_5mer"] == "TTTTT"
        assert df["gc_content"].dtype == float


class TestWritePredictions:
    """Tests for writing prediction tables."""

    def test_round_trip(self, stub_classifier, example_df, tmp_path):
        predictions = prediction_multiple(stub_classifier, example_df)
        path = write_predictions(predictions, tmp_path / "out" / "predictions.csv")
        written = pd.read_csv(path)
        assert list(written.columns) == list(predictions.columns)
        assert written["predicted_m6A_status"].tolist() == predictions["predicted_m6A_status"].tolist()

    def test_compress_appends_suffix(self, stub_classifier, example_df, tmp_path):
        predictions = prediction_multiple(stub_classifier, example_df)
        path = write_predictions(predictions, tmp_path / "predictions.csv", compress=True)
        assert path.name == "predictions.csv.gz"
        assert len(pd.read_csv(path)) == len(example_df)
