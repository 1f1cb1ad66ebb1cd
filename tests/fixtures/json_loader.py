import copy
import json
from pathlib import Path
from typing import Any, Dict, List


class TestDataLoader:
    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json", encoding="utf-8") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get(cls, key: str) -> Any:
        return cls.load().get(key)

    @classmethod
    def payload(cls, key: str, **overrides: Any) -> Dict[str, Any]:
        """Deep copy of an equipment payload with fields replaced"""
        data = copy.deepcopy(cls.get(key))
        data.update(overrides)
        return data

    @classmethod
    def inventory(cls) -> List[Dict[str, Any]]:
        return copy.deepcopy(cls.get("inventory"))
