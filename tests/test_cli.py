import pytest
import joblib
import pandas as pd

from m6aprediction.cli import main
from m6aprediction.io.table import example_data_path


@pytest.fixture
def model_path(fitted_pipeline, tmp_path):
    path = tmp_path / "rf_fit.joblib"
    joblib.dump(fitted_pipeline, path)
    return path


class TestCli:
    """Tests for the m6a-predict command."""

    def test_batch_to_file(self, model_path, tmp_path):
        out = tmp_path / "predictions.csv"
        code = main([
            "--model", str(model_path),
            "batch", "--input", str(example_data_path()), "--output", str(out),
        ])
        assert code == 0
        predictions = pd.read_csv(out)
        assert len(predictions) == 10
        assert {"predicted_m6A_prob", "predicted_m6A_status"} <= set(predictions.columns)

    def test_batch_to_stdout(self, model_path, capsys):
        code = main(["--model", str(model_path), "batch", "--input", str(example_data_path())])
        assert code == 0
        header = capsys.readouterr().out.splitlines()[0]
        assert header.endswith("predicted_m6A_prob,predicted_m6A_status")

    def test_single(self, model_path, capsys):
        code = main([
            "--model", str(model_path), "--threshold", "0.4",
            "single",
            "--gc-content", "0.5", "--rna-type", "mRNA", "--rna-region", "CDS",
            "--exon-length", "10", "--distance-to-junction", "8",
            "--evolutionary-conservation", "0.5", "--dna-5mer", "GGACA",
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "predicted_m6A_prob" in out
        assert "predicted_m6A_status" in out

    def test_config_file(self, model_path, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text(f"model_path: {model_path}\npositive_threshold: 0.0\n")
        code = main(["--config", str(config), "batch", "--input", str(example_data_path())])
        assert code == 0

    def test_missing_model(self, tmp_path):
        code = main(["batch", "--input", str(example_data_path())])
        assert code == 1

    def test_missing_columns(self, model_path, tmp_path):
        bad = tmp_path / "bad.csv"
        pd.read_csv(example_data_path()).drop(columns=["gc_content"]).to_csv(bad, index=False)
        code = main(["--model", str(model_path), "batch", "--input", str(bad)])
        assert code == 1

    def test_invalid_threshold(self, model_path):
        code = main(["--model", str(model_path), "--threshold", "3", "batch", "--input", "x.csv"])
        assert code == 1

    def test_malformed_config(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("model_path: [unclosed\n")
        code = main(["--config", str(config), "batch", "--input", str(example_data_path())])
        assert code == 1
        assert "Error" in capsys.readouterr().err

    def test_non_scalar_model_path(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("model_path:\n  - a.joblib\n  - b.joblib\n")
        code = main(["--config", str(config), "batch", "--input", str(example_data_path())])
        assert code == 1
        assert "Error" in capsys.readouterr().err
