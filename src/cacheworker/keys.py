"""Loading of the static cache key list."""

import json
from pathlib import Path

from cacheworker.core.exceptions import KeyFileError
from cacheworker.utils.batching import unique_keys


def load_cache_keys(path: str | Path) -> list[str]:
    """Load cache keys from a JSON file.

    The file must contain a JSON array of strings. Repeated keys are
    dropped, keeping the first occurrence.

    Args:
        path: Path of the JSON file.

    Returns:
        The keys in file order.

    Raises:
        KeyFileError: If the file is missing, unreadable or malformed.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise KeyFileError(f"Cannot read cache keys from {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise KeyFileError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise KeyFileError(f"{path} must contain a JSON array of keys")
    for index, key in enumerate(data):
        if not isinstance(key, str):
            raise KeyFileError(
                f"{path}: entry {index} is {type(key).__name__}, expected a string"
            )

    return unique_keys(data)
