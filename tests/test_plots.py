import pandas as pd

from review_pyspark import plots


def _frame():
    return pd.DataFrame({
        "year": [1990, 2000, 2010],
        "prediction": [1992.0, 1998.5, 2007.0],
        "residual": [-2.0, 1.5, 3.0],
    })


def test_plot_predicted_vs_actual(tmp_path):
    path = plots.plot_predicted_vs_actual(_frame(), "year", tmp_path / "predicted.png")
    assert (tmp_path / "predicted.png").stat().st_size > 0
    assert path.endswith("predicted.png")


def test_plot_residuals(tmp_path):
    plots.plot_residuals(_frame(), tmp_path / "residuals.png")
    assert (tmp_path / "residuals.png").exists()
