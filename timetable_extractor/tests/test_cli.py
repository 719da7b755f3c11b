import io
import sys

import pandas as pd

from timetable_extractor.__main__ import main


def test_prints_table(tmp_path, timetable_pdf, capsys):
    pdf_path = tmp_path / "timetable.pdf"
    pdf_path.write_bytes(timetable_pdf)

    assert main([str(pdf_path)]) == 0

    out = capsys.readouterr().out
    assert "Matière" in out
    assert "J.Doe" in out
    assert "Physics" in out


def test_filters_and_csv(tmp_path, timetable_pdf):
    pdf_path = tmp_path / "timetable.pdf"
    pdf_path.write_bytes(timetable_pdf)
    csv_path = tmp_path / "out.csv"

    assert main([str(pdf_path), "--day", "Monday", "--csv", str(csv_path)]) == 0

    df = pd.read_csv(csv_path, dtype=str)
    assert df["Matière"].tolist() == ["Physics"]
    assert df["Enseignant"].tolist() == ["N/A"]


def test_empty_document(tmp_path, blank_pdf, capsys):
    pdf_path = tmp_path / "blank.pdf"
    pdf_path.write_bytes(blank_pdf)

    assert main([str(pdf_path)]) == 0
    assert "No data could be extracted" in capsys.readouterr().out


def test_rejects_non_pdf(tmp_path, capsys):
    txt_path = tmp_path / "notes.txt"
    txt_path.write_text("hello")

    assert main([str(txt_path)]) == 1
    assert main([str(tmp_path / "missing.pdf")]) == 1


def test_error_output_is_ascii(tmp_path, monkeypatch):
    stderr = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
    monkeypatch.setattr(sys, "stderr", stderr)

    assert main([str(tmp_path / "missing.pdf")]) == 1

    stderr.flush()
    assert stderr.buffer.getvalue().startswith(b"Error: ")
