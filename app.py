from __future__ import annotations
from fastapi import FastAPI
from kluster.api.routers_clusters import router as clusters_router
from kluster.main.utils.settings import KlusterSettings, settings_from_env


def create_app(settings: KlusterSettings) -> FastAPI:
    app = FastAPI(title="Kluster kubeconfig API", version="0.1.0")
    app.state.settings = settings
    app.include_router(clusters_router)

    @app.get('/health')
    async def health():
        return {"status": "ok"}

    return app


app = create_app(settings_from_env())
