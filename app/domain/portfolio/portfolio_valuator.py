"""
Domain service: Portfolio valuation across currencies.

Aggregates per-position cost, value and FX impact into a single summary
reported in the base currency. Pure functions over explicit inputs:
positions, companies, quotes keyed by ticker and rates keyed by currency.
Inputs are never mutated.
"""

from datetime import date, timedelta
from typing import Iterable, Mapping

from app.domain.portfolio.entities import (
    Company,
    CurrencyRate,
    DividendProjection,
    PortfolioPosition,
    PortfolioSummary,
    PositionDetail,
    StockPrice,
    TradeAction,
    TradingWindow,
)

DEFAULT_RATE = 1.0
DEFAULT_DIVIDEND_YIELD = 2.0
PAYMENTS_PER_YEAR = 4
NEXT_PAYMENT_DAYS = 30

FX_WAIT_THRESHOLD = 1.0
FX_VOLATILE_THRESHOLD = 0.5


def _percent(part: float, whole: float) -> float:
    """Return part/whole as a percentage, 0 when whole is 0."""
    if whole == 0:
        return 0.0
    return part / whole * 100


def rate_table(rates: Iterable[CurrencyRate], base_currency: str) -> dict[str, float]:
    """Map each currency to its rate against the base currency.

    The base currency itself converts at 1.
    """
    table = {
        r.from_currency: float(r.rate)
        for r in rates
        if r.to_currency == base_currency
    }
    table[base_currency] = 1.0
    return table


def summarize(
    positions: Iterable[PortfolioPosition],
    companies: Iterable[Company],
    prices: Mapping[str, StockPrice],
    rates: Mapping[str, float],
) -> PortfolioSummary:
    """Value every resolvable position in the base currency.

    Positions whose company or quote cannot be resolved are skipped
    without error and do not affect the totals.

    Args:
        positions: Positions to value.
        companies: Company catalog used to resolve ``company_id``.
        prices: Current quotes keyed by ticker.
        rates: Rate to the base currency keyed by currency code.
            Unknown currencies convert at 1.

    Returns:
        The aggregated summary and a detail row per valued position.
    """
    by_id = {c.id: c for c in companies}

    details: list[PositionDetail] = []
    total_value = 0.0
    total_cost = 0.0
    total_fx_impact = 0.0

    for position in positions:
        company = by_id.get(position.company_id)
        if company is None:
            continue
        quote = prices.get(company.ticker)
        if quote is None:
            continue

        shares = float(position.shares)
        average_cost = float(position.average_cost)
        purchase_rate = rates.get(position.purchase_currency, DEFAULT_RATE)
        current_rate = rates.get(company.currency, DEFAULT_RATE)

        current_value = shares * quote.price_in_base
        cost = shares * average_cost * purchase_rate
        total_return = current_value - cost
        # Share of the return explained by currency movement alone.
        fx_impact = shares * quote.price * (current_rate - purchase_rate)

        details.append(
            PositionDetail(
                position_id=position.id,
                company=company,
                shares=shares,
                average_cost=average_cost,
                current_price=quote.price_in_base,
                current_value=current_value,
                total_return=total_return,
                total_return_percent=_percent(total_return, cost),
                fx_impact=fx_impact,
            )
        )

        total_value += current_value
        total_cost += cost
        total_fx_impact += fx_impact

    total_change = total_value - total_cost
    return PortfolioSummary(
        total_value=total_value,
        total_change=total_change,
        change_percent=_percent(total_change, total_cost),
        fx_impact=total_fx_impact,
        positions=tuple(details),
    )


def project_dividends(
    summary: PortfolioSummary,
    yields: Mapping[str, float],
    today: date,
) -> DividendProjection:
    """Estimate dividend income from the current valuation.

    Args:
        summary: Portfolio summary to project from.
        yields: Annual dividend yield in percent keyed by ticker.
            Unknown tickers use 2%.
        today: Reference date for the next payment.
    """
    annual = sum(
        detail.current_value
        * (yields.get(detail.company.ticker, DEFAULT_DIVIDEND_YIELD) / 100)
        for detail in summary.positions
    )
    return DividendProjection(
        annual_dividend=annual,
        yield_percent=_percent(annual, summary.total_value),
        next_payment=annual / PAYMENTS_PER_YEAR,
        next_payment_date=today + timedelta(days=NEXT_PAYMENT_DAYS),
    )


def analyze_trading_window(action: TradeAction, change_percent: float) -> TradingWindow:
    """Advise on trade timing given the quote currency's recent move.

    A weakening currency hurts a SELL converted back to the base currency;
    a strengthening one makes a BUY more expensive.
    """
    if action is TradeAction.BUY:
        fx_advantage = -change_percent
    else:
        fx_advantage = change_percent

    recommended = True
    reason = "Current FX rates are favorable"
    window = "Next 24 hours"

    if action is TradeAction.SELL and change_percent < -FX_WAIT_THRESHOLD:
        recommended = False
        reason = "Currency rates unfavorable for base currency conversion. Consider waiting."
        window = "Wait 2-3 days for better rates"
    elif action is TradeAction.BUY and change_percent > FX_WAIT_THRESHOLD:
        recommended = False
        reason = "Currency rates make purchase more expensive. Consider waiting."
        window = "Wait for currency dip"
    elif abs(change_percent) > FX_VOLATILE_THRESHOLD:
        window = "Monitor rates closely - volatile period"

    return TradingWindow(
        recommended=recommended,
        reason=reason,
        optimal_window=window,
        fx_advantage=round(fx_advantage, 2),
    )
