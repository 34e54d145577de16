import pandas as pd

from drain.output import (
    SUMMARY_COLUMNS,
    col_text,
    print_col,
    save_summary_csv,
    summary_frame,
)


def test_print_col_one_value_per_line(capsys):
    print_col([3, 1.5, "x"])
    assert capsys.readouterr().out == "3\n1.5\nx\n"


def test_col_text_preserves_order():
    assert col_text([2, 1, 3]).splitlines() == ["2", "1", "3"]
    assert col_text([]) == ""


def test_summary_frame_single_sample():
    df = summary_frame([1, 2, 2, 3, 3, 4, 4, 5, 100])
    assert list(df.columns) == SUMMARY_COLUMNS
    row = df.iloc[0]
    assert row["Sample"] == "sample"
    assert row["n"] == 9
    assert row["Median"] == 3
    assert row["Extreme Outliers"] == 1
    assert row["Whisker High"] == 5


def test_summary_frame_named_samples():
    df = summary_frame({"a": [1, 2, 3, 4], "b": [10, 20]})
    assert list(df["Sample"]) == ["a", "b"]
    assert df.loc[df["Sample"] == "a", "Mean"].iloc[0] == 2.5


def test_save_summary_csv(tmp_path, capsys):
    path = save_summary_csv({"a": [1, 2, 3]}, output_dir=str(tmp_path / "out"))
    assert path.endswith("summary.csv")
    df = pd.read_csv(path)
    assert list(df.columns) == SUMMARY_COLUMNS
    assert df["Sum"].iloc[0] == 6.0
    assert "Saved summary statistics" in capsys.readouterr().out
