from datetime import UTC, datetime

import pandas as pd
import pytest

from pzfx_writer.domain.services.document_builder import CreationInfo


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep a local pzfx_writer.toml or PZFX_* variables from leaking in.

    The writer loads its configuration from the working directory and the
    environment; tests always start from the built-in defaults.
    """
    for name in ("PZFX_CREATED_BY_PROGRAM", "PZFX_CREATED_BY_VERSION", "PZFX_LOGIN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def created() -> CreationInfo:
    return CreationInfo(timestamp=datetime(2025, 6, 19, 12, 30, 5, tzinfo=UTC))


@pytest.fixture
def replicate_frame() -> pd.DataFrame:
    """3 rows, two groups of two replicates."""
    return pd.DataFrame(
        {
            "A_1": [1.5, 2.0, 3.25],
            "A_2": [4, 5, 6],
            "B_1": [7.0, 8.0, 9.0],
            "B_2": [10, 11, 12],
        }
    )


@pytest.fixture
def xy_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Time": [1, 2, 3, 4],
            "Time_error": [0.1, 0.1, 0.2, 0.1],
            "Measurement_1": [2.0, 4.0, 8.0, 16.0],
            "Measurement_2": [12.0, 14.0, 18.0, 116.0],
        }
    )
