from typing import Dict, Iterable, List, Set


def exclude_keys(data: Dict, keys: Set[str]) -> Dict:
    return {k: v for k, v in data.items() if k not in keys}


def without_ids(rows: Iterable[Dict]) -> List[Dict]:
    return [exclude_keys(row, {"id"}) for row in rows]
