import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdfsplit.api.routes import health, page_count, split
from pdfsplit.config import CORS_ORIGINS, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="PDF Split API",
    version="0.1",
    description="Split PDFs by page ranges, into fixed-size chunks, or by removing pages.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(split.router, tags=["Organize"])
app.include_router(page_count.router, tags=["Analysis"])
