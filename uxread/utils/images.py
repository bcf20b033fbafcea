import os
from fastapi import UploadFile, HTTPException
import magic
from uxread.core.config import ALLOWED_EXTENSIONS, MIME_ALLOW, MAX_UPLOAD_BYTES


async def read_image(file: UploadFile) -> tuple[str, bytes]:
    filename = file.filename or ""
    _, ext = os.path.splitext(filename)
    ext = ext.lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"{filename or 'file'}: only PNG, JPEG, BMP or TIFF images allowed",
        )

    chunks = []
    size = 0
    while True:
        chunk = await file.read(1 << 20)  # 1 MB
        if not chunk:
            break
        size += len(chunk)
        if size > MAX_UPLOAD_BYTES:
            raise HTTPException(status_code=413, detail=f"{filename}: file too large")
        chunks.append(chunk)
    data = b"".join(chunks)

    file_mime = magic.from_buffer(data, mime=True)
    if file_mime not in MIME_ALLOW[ext]:
        raise HTTPException(
            status_code=400,
            detail=f"Unexpected MIME type: {file_mime} for {ext}"
        )
    return filename, data
