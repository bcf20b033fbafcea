# uxread/services/batch.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple, Union

from uxread.core.config import OCR_WORKERS
from uxread.models.report import BatchReport, ImageError, ImageResult
from uxread.services.analyze import analyze_text, summarize
from uxread.services.extract import AzureReadClient, ExtractionError, extract_text

log = logging.getLogger("batch")

Image = Tuple[str, bytes]  # (filename, raw bytes)


def _process_one(
    client: AzureReadClient, image: Image, use_fallback: bool
) -> Union[ImageResult, ImageError]:
    filename, data = image

    def on_progress(pct: float) -> None:
        log.debug("OCR progress for %s: %.0f%%", filename, pct)

    try:
        text = extract_text(client, data, on_progress=on_progress, use_fallback=use_fallback)
    except ExtractionError as e:
        log.error("Error processing %s: %s", filename, e)
        return ImageError(filename=filename, error=str(e))

    report = analyze_text(text)
    return ImageResult(filename=filename, extracted_text=text, **report.model_dump())


def analyze_images(
    images: Sequence[Image],
    client: AzureReadClient,
    use_fallback: bool = False,
    workers: Optional[int] = None,
) -> BatchReport:
    """
    Extract and analyze each image independently. A failed extraction is
    reported in `errors` and does not stop the other images.
    """
    if not images:
        return BatchReport(summary=summarize([]), results=[], errors=[])

    with ThreadPoolExecutor(max_workers=min(workers or OCR_WORKERS, len(images))) as pool:
        outcomes = list(pool.map(lambda img: _process_one(client, img, use_fallback), images))

    results: List[ImageResult] = [o for o in outcomes if isinstance(o, ImageResult)]
    errors: List[ImageError] = [o for o in outcomes if isinstance(o, ImageError)]
    if errors:
        log.warning("%d of %d image(s) failed to process", len(errors), len(images))

    return BatchReport(
        summary=summarize(results, failed=len(errors)),
        results=results,
        errors=errors,
    )
