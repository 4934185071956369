"""表达式文件加载与结果保存"""
import pandas as pd
import pytest

from data import load_expressions, save_results


def test_load_csv(tmp_path):
    path = tmp_path / "exprs.csv"
    pd.DataFrame({"id": [1, 2], "expression": ["2 + 3", "42"]}).to_csv(path, index=False)

    expressions = load_expressions(str(path))
    assert expressions.tolist() == ["2 + 3", "42"]
    assert expressions.name == "expression"


def test_load_csv_custom_column(tmp_path):
    path = tmp_path / "exprs.csv"
    pd.DataFrame({"formula": ["8 / 4 / 2"]}).to_csv(path, index=False)
    assert load_expressions(str(path), "formula").tolist() == ["8 / 4 / 2"]


def test_load_csv_missing_column(tmp_path):
    path = tmp_path / "exprs.csv"
    pd.DataFrame({"formula": ["1"]}).to_csv(path, index=False)
    with pytest.raises(ValueError):
        load_expressions(str(path))


def test_load_text_file_skips_blank_and_comments(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("# sample\n2 + 3\n\n  (1 + 1) * 2  \n", encoding="utf-8")
    assert load_expressions(str(path)).tolist() == ["2 + 3", "(1 + 1) * 2"]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_expressions(str(tmp_path / "nope.csv"))


def test_save_results(tmp_path):
    results = pd.DataFrame({"expression": ["1 + 1"], "result": [2.0], "error": [None]})
    path = save_results(results, str(tmp_path / "out.csv"))
    saved = pd.read_csv(path)
    assert saved["result"].tolist() == [2.0]
