"""Backing logic: data source, record store, load controller."""

from .data_source import (
    FETCH_FAILURE_MESSAGE,
    FetchFailure,
    MockSessionDataSource,
    SessionDataSource,
    coerce_mins,
    normalize_session,
)
from .dataset_loader import DatasetLoader, LoadedDataset
from .load_controller import LoadController
from .record_store import RecordStore

__all__ = [
    "FETCH_FAILURE_MESSAGE",
    "FetchFailure",
    "MockSessionDataSource",
    "SessionDataSource",
    "coerce_mins",
    "normalize_session",
    "DatasetLoader",
    "LoadedDataset",
    "LoadController",
    "RecordStore",
]
