from pathlib import Path

import pytest

SAMPLE_CSV = (
    " Biomarker_Name ,Unit,Male_18-39_Optimal,Male_18-39_InRange,Male_18-39_OutOfRange,"
    "Graph_Range,Date1,Value1,Date2,Value2\n"
    "Metabolic Health Score,score,80-100,60-80,<60,,Feb 1 2024,72,Jan 1 2024,65\n"
    "Metabolic Graph Value,,,,,,,,,\n"
    "Creatine,mg/dL,0.7-1.2,1.2-1.5,>1.5,,,,,\n"
    ",,,,,,,,,\n"
    "value: see notes,,,,,,,,,\n"
)


@pytest.fixture()
def sample_csv_text() -> str:
    """A small sheet export with two biomarkers and the usual auxiliary rows."""
    return SAMPLE_CSV


@pytest.fixture()
def sample_csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "biomarkers.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture()
def creatine_row() -> dict[str, str | None]:
    return {
        "Biomarker_Name": "Creatine",
        "Unit": "mg/dL",
        "Male_18-39_Optimal": "0.7-1.2",
        "Male_18-39_InRange": "1.2-1.5",
    }
