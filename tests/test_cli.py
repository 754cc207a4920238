import io
import sys
from datetime import date

import pytest

from deltahedge.blackscholes import BlackScholes
from deltahedge.cli import main, prompt_date, prompt_option_type
from deltahedge.dates import business_years

DAYS = ["2011-07-05", "2011-07-06", "2011-07-07", "2011-07-08"]
PRICES = [500.0, 505.0, 498.0, 502.0]


def _io(tokens):
    written = []
    return iter(tokens).__next__, written.append, written


def test_prompt_date_retries_until_valid():
    read, write, written = _io(["07/05/2011", "2011-13-45", "2011-07-05"])
    assert prompt_date("Start?", read, write) == date(2011, 7, 5)
    assert written.count("Invalid format, try again.") == 2
    assert written.count("Start?") == 3


def test_prompt_option_type():
    read, write, written = _io(["x", "P"])
    assert prompt_option_type(read, write) == ("P", False)
    assert "You enter an invalid type. Try again." in written
    read, write, _ = _io(["c"])
    assert prompt_option_type(read, write) == ("C", True)


def _write_data(data_dir):
    data_dir.mkdir()
    rate = 0.002
    expiry = date(2011, 9, 17)
    tau = business_years(DAYS[0], expiry)
    (data_dir / "interest.csv").write_text(
        "date,rate\n" + "".join(f"{d},0.2\n" for d in DAYS) + "2011-07-11,0.2\n"
    )
    (data_dir / "sec_GOOG.csv").write_text(
        "date,close\n" + "".join(f"{d},{p!r}\n" for d, p in zip(DAYS, PRICES))
        + "2011-07-11,510\n"
    )
    lines = ["date,exdate,cp_flag,strike_price,best_bid,best_offer"]
    for day, spot in zip(DAYS, PRICES):
        price = BlackScholes(500, spot, 0.25, rate, tau, 0, True).value()
        lines.append(f"{day},2011-09-17,C,500,{price!r},{price!r}")
        lines.append(f"{day},2011-09-17,P,500,1,2")
    (data_dir / "op_GOOG.csv").write_text("\n".join(lines) + "\n")


def _run(monkeypatch, tmp_path, answers):
    monkeypatch.setattr(sys, "stdin", io.StringIO(answers))
    return main([
        "--data-dir", str(tmp_path / "data"),
        "--out-dir", str(tmp_path / "out"),
        "--simulations", "3",
        "--samples", "2",
    ])


def test_main_writes_hedge_report(monkeypatch, tmp_path, capsys):
    _write_data(tmp_path / "data")
    code = _run(monkeypatch, tmp_path,
                "2011-07-05\n2011-07-08\n2011-09-17\nc\n500\n")
    assert code == 0
    out = tmp_path / "out"
    assert len((out / "hedgeTest100.csv").read_text().splitlines()) == 2
    assert (out / "hedgeTest1000.csv").read_text().splitlines()[1] == "3 simulation"
    lines = (out / "deltaHedge.csv").read_text().splitlines()
    rows = lines[10:]
    assert [row.split(",")[0] for row in rows] == DAYS
    for row in rows:
        assert float(row.split(",")[3]) == pytest.approx(0.25, abs=1e-3)
    assert "Option type: C" in lines


def test_main_reports_no_match(monkeypatch, tmp_path, capsys):
    _write_data(tmp_path / "data")
    code = _run(monkeypatch, tmp_path,
                "2011-07-08\n2011-07-05\n2011-07-05\n2011-07-08\n2011-09-17\nC\n600\n")
    assert code == 0
    printed = capsys.readouterr().out
    assert "Start date should before end date. Try enter again." in printed
    assert "There is no matching option in the dataset." in printed
    assert not (tmp_path / "out" / "deltaHedge.csv").exists()


def test_main_missing_data_files(monkeypatch, tmp_path, capsys):
    (tmp_path / "data").mkdir()
    code = _run(monkeypatch, tmp_path,
                "2011-07-05\n2011-07-08\n2011-07-07\np\n500\n")
    assert code == 0
    printed = capsys.readouterr().out
    assert "Fail to open this op_GOOG.csv." in printed
    assert "The end date is greater than the option expiry date." in printed


def test_main_stops_at_end_of_input(monkeypatch, tmp_path):
    (tmp_path / "data").mkdir()
    assert _run(monkeypatch, tmp_path, "2011-07-05\n") == 1