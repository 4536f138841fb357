from pathlib import Path

import main

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def test_run_prints_summary(capsys) -> None:
    args = main.build_parser().parse_args(
        ["run", str(DATA_DIR / "orders.json"), str(DATA_DIR / "paymentmethods.json")]
    )

    assert main.run_batch(args) == 0
    assert capsys.readouterr().out.splitlines() == ["BosBankrut 200.00", "mZysk 150.00", "PUNKTY 100.00"]


def test_run_with_missing_file_fails(tmp_path) -> None:
    args = main.build_parser().parse_args(["run", str(tmp_path / "missing.json"), str(tmp_path / "missing.json")])

    assert main.run_batch(args) == 1
