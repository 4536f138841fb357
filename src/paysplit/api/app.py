import uvicorn
from fastapi import FastAPI

from paysplit.api.routes.allocate import router as allocate_router
from paysplit.api.routes.health import router as health_router
from paysplit.config import settings

app = FastAPI(title="PaySplit API", version="0.1.0")
app.include_router(health_router)
app.include_router(allocate_router)


def run() -> None:
    uvicorn.run("paysplit.api.app:app", host=settings.app_host, port=settings.app_port, reload=False)
