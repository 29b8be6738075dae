from fastapi import FastAPI

from .analysis import router as analysis_router


def include_modular_routers(app: FastAPI) -> None:
    app.include_router(analysis_router, tags=["analysis"])


__all__ = ["include_modular_routers"]
