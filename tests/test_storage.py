from pathlib import Path

from app.infra.storage import BlobStore


def test_put_bytes_is_idempotent(tmp_path: Path) -> None:
    store = BlobStore(root=tmp_path)

    payload = b"%PDF-1.4 plano"

    ref1 = store.put_bytes(data=payload, filename="plano.pdf")
    ref2 = store.put_bytes(data=payload, filename="plano.pdf")

    assert ref1 == ref2
    assert ref1.path.exists()
    assert ref1.path.read_bytes() == payload


def test_put_bytes_sanitizes_filename(tmp_path: Path) -> None:
    ref = BlobStore(root=tmp_path).put_bytes(data=b"x", filename="../../Programa Eleitoral 2025.pdf")

    assert ref.filename == "Programa_Eleitoral_2025.pdf"
    assert ref.path.parent.parent == tmp_path / "blobs"
