from __future__ import annotations

from fastapi import APIRouter, Depends

from eth_price_api.api.deps import get_portfolio_use_case, get_transactions_use_case
from eth_price_api.api.schemas.common import iso_timestamp
from eth_price_api.api.schemas.wallet import (
    PortfolioBalancesResponse,
    PortfolioResponse,
    TransactionResponse,
    TransactionsResponse,
)
from eth_price_api.application.use_cases.get_wallet_data import (
    GetPortfolioUseCase,
    GetTransactionsUseCase,
)

router = APIRouter()


@router.get("/api/portfolio/{address}", response_model=PortfolioResponse)
def get_portfolio(
    address: str,
    use_case: GetPortfolioUseCase = Depends(get_portfolio_use_case),
):
    result = use_case.execute(address=address)
    return PortfolioResponse(
        address=result.address,
        portfolio=PortfolioBalancesResponse(
            eth=result.portfolio.eth,
            usdt=result.portfolio.usdt,
            total_value_usd=result.portfolio.total_value_usd,
        ),
        timestamp=iso_timestamp(result.timestamp),
    )


@router.get("/api/transactions/{address}", response_model=TransactionsResponse)
def get_transactions(
    address: str,
    use_case: GetTransactionsUseCase = Depends(get_transactions_use_case),
):
    result = use_case.execute(address=address)
    return TransactionsResponse(
        address=result.address,
        transactions=[
            TransactionResponse(
                id=row.id,
                type=row.type,
                from_address=row.from_address,
                to_address=row.to_address,
                amount=row.amount,
                token=row.token,
                timestamp=iso_timestamp(row.timestamp),
                status=row.status,
            )
            for row in result.transactions
        ],
        timestamp=iso_timestamp(result.timestamp),
    )
