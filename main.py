import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from routers.admin import router as admin_router

# Routers
from routers.convert import router as convert_router
from routers.health import router as health_router
from routers.questions import router as questions_router

logger = logging.getLogger("percent-drills")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Percent Drills – Question API")

# Allow calls from the flip-card UI dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /questions, /questions/generate, /fractions
app.include_router(convert_router)  # /percent
app.include_router(admin_router)  # /admin/...
app.include_router(health_router)  # /health/...

logger.info(
    "external pair source %s",
    "configured (%s)" % config.gemini_model()
    if config.gemini_api_key()
    else "not configured, generated batches use local pairs",
)
