"""
Use case: Read the live quote of a ticker.

Input: ticker
Output: StockPrice
Side effects: None.
Failure cases: StockPriceNotFoundError.
"""

from app.domain.portfolio.entities import StockPrice
from app.domain.portfolio.errors import StockPriceNotFoundError
from app.domain.portfolio.ports import PriceFeedPort


class GetStockPriceUseCase:
    def __init__(self, price_feed: PriceFeedPort) -> None:
        self._price_feed = price_feed

    def execute(self, ticker: str) -> StockPrice:
        quote = self._price_feed.current_price(ticker)
        if quote is None:
            raise StockPriceNotFoundError(ticker)
        return quote
