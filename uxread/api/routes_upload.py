from typing import List
from fastapi import APIRouter, UploadFile, File, HTTPException
from starlette.concurrency import run_in_threadpool
from uxread.core import config
from uxread.services.batch import analyze_images
from uxread.services.extract import AzureReadClient
from uxread.utils.images import read_image

router = APIRouter(tags=["upload"])


def get_client() -> AzureReadClient:
    return AzureReadClient.from_config()


@router.post("/upload")
async def upload(files: List[UploadFile] = File(...)):
    if len(files) > config.MAX_IMAGES_PER_BATCH:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {config.MAX_IMAGES_PER_BATCH} files allowed",
        )
    images = [await read_image(f) for f in files]
    client = get_client()
    try:
        # polling blocks; keep it off the event loop
        batch = await run_in_threadpool(
            analyze_images, images, client, use_fallback=config.OCR_USE_FALLBACK
        )
    finally:
        client.close()
    return batch.model_dump(by_alias=True)


@router.get("/health/ocr")
def ocr_health():
    client = get_client()
    try:
        return client.check_health()
    finally:
        client.close()
