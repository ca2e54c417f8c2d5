from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import List

from kluster.api.dependencies import get_loader
from kluster.main.kubeconfig.errors import SourceReadError
from kluster.main.kubeconfig.listing import list_clusters
from kluster.main.kubeconfig.loader import KubeconfigLoader

router = APIRouter(tags=["clusters"])

class ClusterRowModel(BaseModel):
    name: str
    config: str = Field(..., description="Base name of the kubeconfig file defining the cluster")
    server: str
    current: bool

class EffectiveConfigResponse(BaseModel):
    current_context: str
    current_cluster: str
    namespace: str | None = None
    clusters: List[str]
    contexts: List[str]
    users: List[str]
    sources: List[str]

@router.get('/clusters', response_model=List[ClusterRowModel], summary="List clusters from every discovered kubeconfig")
def get_clusters(loader: KubeconfigLoader = Depends(get_loader)):
    try:
        rows = list_clusters(loader, loader)
    except SourceReadError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return [ClusterRowModel(name=r.name, config=r.config_file, server=r.server, current=r.current) for r in rows]

@router.get('/config/effective', response_model=EffectiveConfigResponse, summary="Merged kubeconfig view")
def get_effective(loader: KubeconfigLoader = Depends(get_loader)):
    try:
        view = loader.get_merged_view()
    except SourceReadError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    cfg = view.effective
    ctx = cfg.current_context_entry()
    return EffectiveConfigResponse(
        current_context=cfg.current_context,
        current_cluster=cfg.current_cluster_name(),
        namespace=ctx.namespace if ctx else None,
        clusters=sorted(cfg.clusters),
        contexts=sorted(cfg.contexts),
        users=sorted(cfg.users),
        sources=view.origins,
    )
