import logging
from fastapi import FastAPI
from uxread.core.config import LOG_LEVEL
from uxread.api.routes_upload import router as upload_router
from uxread.api.routes_analyze import router as analyze_router
from uxread.middleware.limits import BodySizeLimitMiddleware

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="UX Readability Analyzer")

app.add_middleware(BodySizeLimitMiddleware)

@app.get("/health")
def health():
    return {"status": "ok"}

app.include_router(upload_router)
app.include_router(analyze_router)
