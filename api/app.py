import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI
from .routers import charts as charts_router
from .routers import coordinates as coordinates_router
from .middleware.logging import LoggingMiddleware

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="natal-chart-engine", version="0.1.0")

app.add_middleware(LoggingMiddleware)

app.include_router(charts_router.router)
app.include_router(coordinates_router.router)


@app.get("/__health")
def health():
    return {"ok": True}


@app.get("/")
def root():
    return {"message": "natal-chart-engine API is running. See /__health and /docs."}
