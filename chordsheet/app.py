import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chordsheet.config import settings
from chordsheet.routes.charts import router as charts_router
from chordsheet.routes.editor import router as editor_router
from chordsheet.routes.health import router as health_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Chordsheet API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(charts_router)
app.include_router(editor_router)
