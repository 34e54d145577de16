import os

from drain.plotting import plot_boxplot, plot_regression
from drain.stats import lin_reg


def test_plot_boxplot_single_sample(tmp_path):
    out = plot_boxplot([1, 2, 2, 3, 3, 4, 4, 5, 100], output_dir=str(tmp_path))
    assert out.endswith("boxplot.png")
    assert os.path.exists(out)


def test_plot_boxplot_named_samples(tmp_path):
    out = plot_boxplot(
        {"a": [1, 2, 3, 4, 5, 6, 7, 8, 14], "b": [2, 3, 4]},
        output_dir=str(tmp_path),
        file_stem="groups",
        title="Groups",
    )
    assert out.endswith("groups.png")
    assert os.path.exists(out)


def test_plot_regression(tmp_path):
    x = [1, 2, 3, 4, 5]
    y = [2.1, 3.9, 6.2, 7.8, 10.1]
    out = plot_regression(x, y, fit=lin_reg(x, y), output_dir=str(tmp_path))
    assert out.endswith("regression.png")
    assert os.path.exists(out)
