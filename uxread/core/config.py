import os

MAX_UPLOAD_BYTES = 50 * 1024 * 1024  # 50 MB, Azure Read API limit
MAX_IMAGES_PER_BATCH = 10
ALLOWED_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.bmp', '.tif', '.tiff'}
MIME_ALLOW = {
    ".png": {"image/png"},
    ".jpg": {"image/jpeg"},
    ".jpeg": {"image/jpeg"},
    ".bmp": {"image/bmp", "image/x-ms-bmp"},
    ".tif": {"image/tiff"},
    ".tiff": {"image/tiff"},
}

# Analyzer configuration (fixed; reports are compared across versions)
LONG_SENTENCE_THRESHOLD = 20  # words
GRADE_LEVEL_TARGET = 9        # grades above this count as an issue

# Text extraction (Azure Computer Vision Read API)
AZURE_VISION_ENDPOINT = os.getenv("AZURE_VISION_ENDPOINT", "")
AZURE_VISION_KEY = os.getenv("AZURE_VISION_KEY", "")
OCR_MAX_ATTEMPTS = int(os.getenv("OCR_MAX_ATTEMPTS", "30"))
OCR_POLL_INTERVAL = float(os.getenv("OCR_POLL_INTERVAL", "1.0"))  # seconds
OCR_REQUEST_TIMEOUT = float(os.getenv("OCR_REQUEST_TIMEOUT", "30"))
OCR_USE_FALLBACK = os.getenv("OCR_USE_FALLBACK", "").lower() in ("1", "true", "yes")
OCR_WORKERS = int(os.getenv("OCR_WORKERS", "4"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
