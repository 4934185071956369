"""命令行入口"""
import pandas as pd

from config.config import validate_config
from main import build_parser, main


def run(argv):
    return main(build_parser().parse_args(argv))


def test_config_is_valid():
    assert validate_config()


def test_main_success_writes_output(tmp_path):
    output = tmp_path / "results.csv"
    assert run(["2 + 3 * (4 - 1)", "2 / 0", "--output_path", str(output), "--show_postfix"]) == 0
    saved = pd.read_csv(output)
    assert saved["result"].tolist()[0] == 11.0


def test_main_reports_failures():
    assert run(["2 + + 3"]) == 1


def test_main_without_input():
    assert run([]) == 2


def test_main_reads_data_file(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("1 + 1\n8 / 4 / 2\n", encoding="utf-8")
    assert run(["--data_path", str(path)]) == 0


def test_main_legacy_tokenizer():
    assert run(["12 + 3", "--legacy_tokenizer"]) == 1
