# data_io.py
from __future__ import annotations
import logging
import streamlit as st
import pandas as pd
from typing import Iterable, Optional
from constants import EXPECTED_COLS

logger = logging.getLogger(__name__)


class DataLoadError(Exception):
    """Fetching or parsing the shipment CSV failed; nothing downstream can run."""


def _read_csv(source, label: str) -> pd.DataFrame:
    try:
        df = pd.read_csv(source, skip_blank_lines=True, low_memory=False)
    except FileNotFoundError as e:
        raise DataLoadError(f"Error fetching data: {label} not found") from e
    except OSError as e:
        raise DataLoadError(f"Error fetching data: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise DataLoadError(f"Error parsing CSV: {label} is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Error parsing CSV: {e}") from e

    err = validate_columns(df, EXPECTED_COLS)
    if err:
        raise DataLoadError(err)
    logger.info("Loaded %d rows from %s", len(df), label)
    return df

@st.cache_data
def load_sample(path: str) -> pd.DataFrame:
    return _read_csv(path, path)

def load_uploaded(file) -> pd.DataFrame:
    return _read_csv(file, getattr(file, "name", "uploaded file"))

def validate_columns(df: pd.DataFrame, expected: Iterable[str]) -> Optional[str]:
    """User-facing message naming the missing columns, or None when all are present."""
    missing = [c for c in expected if c not in df.columns]
    return f"Missing required columns: {', '.join(missing)}" if missing else None
