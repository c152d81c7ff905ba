"""
Domain-specific errors for the portfolio bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class PortfolioDomainError(Exception):
    """Base error for all portfolio domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class CompanyNotFoundError(PortfolioDomainError):
    """Raised when a company id or ticker is unknown."""

    def __init__(self, company_ref: str) -> None:
        super().__init__(f"Company not found: {company_ref}")
        self.company_ref = company_ref


class PositionNotFoundError(PortfolioDomainError):
    """Raised when a portfolio position cannot be found."""

    def __init__(self, position_id: int) -> None:
        super().__init__(f"Position not found: {position_id}")
        self.position_id = position_id


class StockPriceNotFoundError(PortfolioDomainError):
    """Raised when the price feed has no quote for a ticker."""

    def __init__(self, ticker: str) -> None:
        super().__init__(f"Stock price not found: {ticker}")
        self.ticker = ticker


class AlertNotFoundError(PortfolioDomainError):
    """Raised when a market alert cannot be found."""

    def __init__(self, alert_id: int) -> None:
        super().__init__(f"Market alert not found: {alert_id}")
        self.alert_id = alert_id


class InvalidTradeActionError(PortfolioDomainError):
    """Raised when a trade action is neither BUY nor SELL."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Invalid trade action: {action}. Must be BUY or SELL.")
        self.action = action


class DataRefreshError(PortfolioDomainError):
    """Raised when a step of the data refresh batch fails."""

    def __init__(self, step: str, reason: str) -> None:
        super().__init__(f"Data refresh failed at step '{step}': {reason}")
        self.step = step
        self.reason = reason
