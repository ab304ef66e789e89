from dataclasses import dataclass

import pytesseract
from PIL import Image

from app.infra.logger import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class OcrResult:
    text: str
    confidence: float | None


def ocr_image(img: Image.Image, lang: str = "por") -> OcrResult:
    try:
        data = pytesseract.image_to_data(img, lang=lang, output_type=pytesseract.Output.DICT)
    except pytesseract.TesseractError:
        # Language pack may be missing locally.
        log.warning("tesseract language %r unavailable, retrying with eng", lang)
        data = pytesseract.image_to_data(img, lang="eng", output_type=pytesseract.Output.DICT)
    texts: list[str] = []
    confs: list[float] = []

    for t, c in zip(data.get("text", []), data.get("conf", [])):
        if not t or not str(t).strip():
            continue
        texts.append(str(t))
        try:
            cf = float(c)
        except (TypeError, ValueError):
            continue
        if cf >= 0:
            confs.append(cf)

    avg = (sum(confs) / len(confs)) if confs else None
    return OcrResult(text=" ".join(texts).strip(), confidence=avg)
