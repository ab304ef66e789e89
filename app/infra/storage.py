import hashlib
import re
from dataclasses import dataclass
from pathlib import Path

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class BlobRef:
    sha256: str
    path: Path
    filename: str


class BlobStore:
    """Content-addressed storage for uploaded plan PDFs."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def put_bytes(self, data: bytes, filename: str) -> BlobRef:
        sha = hashlib.sha256(data).hexdigest()
        base = self._root / "blobs" / sha
        base.mkdir(parents=True, exist_ok=True)
        safe_name = _UNSAFE_RE.sub("_", Path(filename).name).strip("._") or "document.pdf"
        path = base / safe_name
        if not path.exists():
            path.write_bytes(data)
        return BlobRef(sha256=sha, path=path, filename=safe_name)
