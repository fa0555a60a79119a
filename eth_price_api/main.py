from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eth_price_api.api.routers.eth_price import router as eth_price_router
from eth_price_api.api.routers.health import router as health_router
from eth_price_api.api.routers.wallet import router as wallet_router
from eth_price_api.shared.config import get_settings


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(title="ETH Price API")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(eth_price_router)
    application.include_router(wallet_router)
    application.include_router(health_router)
    return application


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    base = f"http://localhost:{settings.port}"
    logger.info("main: server_starting url=%s", base)
    logger.info("main: endpoint eth_price=%s/api/eth-price", base)
    logger.info("main: endpoint portfolio=%s/api/portfolio/{address}", base)
    logger.info("main: endpoint transactions=%s/api/transactions/{address}", base)
    logger.info("main: endpoint health=%s/api/health", base)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
