from dataclasses import dataclass

import fitz  # PyMuPDF
from PIL import Image

from app.infra.logger import get_logger
from app.infra.ocr import ocr_image

log = get_logger(__name__)


class PdfDecodeError(Exception):
    pass


@dataclass(frozen=True)
class PageText:
    page_number: int
    text: str
    ocr_applied: bool


def extract_pdf_text(
    data: bytes,
    *,
    ocr_enabled: bool = True,
    ocr_lang: str = "por",
    dpi: int = 200,
) -> list[PageText]:
    """Decode a PDF into per-page text.

    Pages without an embedded text layer are rasterized and OCR'd when
    `ocr_enabled` is set; otherwise they come back empty.
    """

    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (fitz.FileDataError, RuntimeError, ValueError) as e:
        raise PdfDecodeError(f"cannot open pdf: {e}") from e

    pages: list[PageText] = []
    zoom = dpi / 72.0
    mat = fitz.Matrix(zoom, zoom)

    with doc:
        for i in range(doc.page_count):
            page = doc.load_page(i)
            text = (page.get_text("text") or "").strip()
            if text or not ocr_enabled:
                pages.append(PageText(page_number=i + 1, text=text, ocr_applied=False))
                continue

            pix = page.get_pixmap(matrix=mat)
            img = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
            res = ocr_image(img, lang=ocr_lang)
            log.info("page %d had no text layer, OCR recovered %d chars", i + 1, len(res.text))
            pages.append(PageText(page_number=i + 1, text=res.text, ocr_applied=True))

    return pages


def join_pages(pages: list[PageText]) -> str:
    return "\n\n".join(p.text for p in pages if p.text)
