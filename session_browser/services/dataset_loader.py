"""
Dataset Loader

Loads the raw mock session dataset (a JSON list of session dicts) from disk.

Usage:
    loader = DatasetLoader(config.sessions_data_path)
    dataset = loader.load()
    print(f"Loaded {len(dataset.sessions)} raw sessions")
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class LoadedDataset:
    """Raw session dicts as read from the data file."""
    path: Path
    sessions: List[Dict]

    @property
    def ids(self) -> List:
        return [s.get("id") for s in self.sessions]


class DatasetLoader:
    """
    Reads a sessions JSON file.

    The file must contain a list of objects, each with at least an ``id`` and
    a ``title``. Ids must be unique.
    """

    def __init__(self, data_path: Path):
        self.data_path = Path(data_path)
        self._loaded: Optional[LoadedDataset] = None

    def load(self, force_reload: bool = False) -> LoadedDataset:
        """
        Load the dataset, caching it after the first read.

        Raises:
            FileNotFoundError: If the data file doesn't exist
            ValueError: If the file isn't a list of session objects or ids repeat
        """
        if self._loaded is not None and not force_reload:
            return self._loaded

        if not self.data_path.exists():
            raise FileNotFoundError(f"Sessions data file not found: {self.data_path}")

        with open(self.data_path) as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"{self.data_path}: expected a JSON list, got {type(data).__name__}")

        seen = set()
        for i, item in enumerate(data):
            if not isinstance(item, dict) or "id" not in item or "title" not in item:
                raise ValueError(f"{self.data_path}: entry {i} must be an object with id and title")
            if item["id"] in seen:
                raise ValueError(f"{self.data_path}: duplicate session id {item['id']!r}")
            seen.add(item["id"])

        self._loaded = LoadedDataset(path=self.data_path, sessions=data)
        return self._loaded
