from __future__ import annotations
from typing import Optional
from fastapi import Query, Request

from kluster.main.kubeconfig.loader import KubeconfigLoader
from kluster.main.utils.settings import KlusterSettings


def get_settings(request: Request) -> KlusterSettings:
    return request.app.state.settings


def get_loader(
    request: Request,
    kubeconfig: Optional[str] = Query(None, description="Primary kubeconfig path override"),
) -> KubeconfigLoader:
    # fresh chain per request so discovery reflects the current ~/.kube contents
    return KubeconfigLoader.from_settings(get_settings(request), primary_path=kubeconfig)
