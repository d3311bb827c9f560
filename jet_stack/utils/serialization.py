import os
from typing import List, Tuple

from google.cloud import storage


def _split_gcs_path(path: str) -> Tuple[str, str]:
    bucket, _, blob_name = path[5:].partition("/")
    if not bucket or not blob_name:
        raise ValueError(f"Invalid gs:// path: {path}")
    return bucket, blob_name


def _write_bytes(path: str, data: bytes) -> None:
    if path.startswith("gs://"):
        bucket, blob_name = _split_gcs_path(path)
        client = storage.Client()
        client.bucket(bucket).blob(blob_name).upload_from_string(data)
    else:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)


def _read_bytes(path: str) -> bytes:
    if path.startswith("gs://"):
        bucket, blob_name = _split_gcs_path(path)
        client = storage.Client()
        return client.bucket(bucket).blob(blob_name).download_as_bytes()
    else:
        with open(path, "rb") as f:
            return f.read()


def load_text(path: str) -> str:
    """Load UTF-8 text from ``path`` which may be local or ``gs://``."""
    return _read_bytes(path).decode("utf-8")


def save_text(text: str, path: str) -> None:
    """Write ``text`` to ``path`` which may be local or ``gs://``."""
    _write_bytes(path, text.encode("utf-8"))


def load_patterns(path: str) -> List[str]:
    """Return the jet patterns in ``path``, one per non-empty line.

    Only line terminators are removed; any other character is a push.
    """
    return [line for line in load_text(path).splitlines() if line]
