"""Ponto de entrada REST para renderizar seletores CSS descritos em JSON."""
from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from seletor.domain import SelectorError
from seletor.schemas import SelectorNodePayload, SelectorResponse
from seletor.settings import get_api_bind_host, get_api_port, get_log_level

_log = logging.getLogger("seletor.api")


def configure_cors(app: FastAPI) -> None:
    """Apply the default CORS configuration."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def include_routes(app: FastAPI, *, prefix: str = "") -> None:
    """Register selector routes on a FastAPI application."""

    router = APIRouter(prefix=prefix, tags=["Seletores"])

    @router.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @router.post("/selectors/stringify", response_model=SelectorResponse)
    def stringify_selector(payload: SelectorNodePayload) -> SelectorResponse:
        try:
            builder = payload.to_domain()
        except SelectorError as exc:
            _log.info("seletor rejeitado: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return SelectorResponse(selector=builder.stringify())

    app.include_router(router)


def create_app() -> FastAPI:
    """Cria a aplicação FastAPI com as rotas de seletores configuradas."""

    app = FastAPI(
        title="Seletor API",
        version="1.0.0",
        description="Monta e valida seletores CSS a partir de descrições em JSON.",
    )
    configure_cors(app)
    include_routes(app)
    return app


def run() -> None:
    """Executa a API utilizando o Uvicorn."""

    load_dotenv()
    uvicorn.run(
        "seletor.api:create_app",
        host=get_api_bind_host(),
        port=get_api_port(),
        log_level=get_log_level().lower(),
        factory=True,
    )


__all__ = ["configure_cors", "create_app", "include_routes", "run"]
