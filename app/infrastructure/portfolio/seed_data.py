"""
Demo data loaded into a fresh store.

Three watchlist companies with their executives, the base quotes the
simulated price feed jitters around, dividend yields, and the rates of
USD, JPY and AUD against TWD.
"""

import logging
from decimal import Decimal

from app.domain.portfolio.entities import CompanyFinancials
from app.infrastructure.portfolio.store import InMemoryStore

logger = logging.getLogger(__name__)

BASE_QUOTES = {
    # ticker: (price, change, change_percent, currency)
    "AAPL": (175.32, 2.45, 1.42, "USD"),
    "TSLA": (248.50, -8.22, -3.20, "USD"),
    "FMG": (24.67, 0.85, 3.57, "AUD"),
}

DIVIDEND_YIELDS = {
    "AAPL": 0.52,
    "TSLA": 0.0,
    "FMG": 8.5,
}

_COMPANIES = [
    {
        "name": "Apple Inc.",
        "ticker": "AAPL",
        "sector": "Technology",
        "currency": "USD",
        "financials": CompanyFinancials(
            cash_reserves=62000,
            annual_revenue=383000,
            annual_profit=100000,
            product_annual_revenue=300000,
            annual_gross_profit=170000,
        ),
        "ceo": {
            "name": "Tim Cook",
            "title": "CEO",
            "tenure": 13,
            "religion": "Christian",
            "strategy": "Innovation-focused",
            "leadership": "Transformational",
            "photo_url": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150&h=150&fit=crop&crop=face",
        },
    },
    {
        "name": "Tesla Inc.",
        "ticker": "TSLA",
        "sector": "Automotive",
        "currency": "USD",
        "financials": CompanyFinancials(
            cash_reserves=22000,
            annual_revenue=96773,
            annual_profit=1535,
            product_annual_revenue=80000,
            annual_gross_profit=20000,
        ),
        "ceo": {
            "name": "Elon Musk",
            "title": "CEO",
            "tenure": 15,
            "religion": "Other Religion",
            "strategy": "Disruptive Growth",
            "leadership": "Visionary",
            "photo_url": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop&crop=face",
        },
    },
    {
        "name": "Fortescue Metals Group",
        "ticker": "FMG",
        "sector": "Mining",
        "currency": "AUD",
        "financials": CompanyFinancials(
            cash_reserves=4900,
            annual_revenue=18220,
            annual_profit=5700,
            product_annual_revenue=16400,
            annual_gross_profit=9547,
        ),
        "ceo": {
            "name": "Andrew Forrest",
            "title": "Executive Chairman",
            "tenure": 18,
            "religion": "Christian",
            "strategy": "ESG-focused",
            "leadership": "Sustainable",
            "photo_url": "https://images.unsplash.com/photo-1560250097-0b93528c311a?w=150&h=150&fit=crop&crop=face",
        },
    },
]

_RATES = [
    # from, rate, change, change_percent, forecast_24h, volatility_risk
    ("USD", "31.245", "0.12", "0.38", "Bullish (+0.8%)", "Low (12%)"),
    ("JPY", "0.2089", "-0.003", "-1.42", "Bearish (-0.5%)", "Medium (18%)"),
    ("AUD", "20.467", "0.08", "0.39", "Stable (+0.2%)", "Low (10%)"),
]


def seed_store(store: InMemoryStore, base_currency: str = "TWD") -> None:
    """Populate an empty store with the demo dataset."""
    for entry in _COMPANIES:
        company = store.companies.create(
            name=entry["name"],
            ticker=entry["ticker"],
            sector=entry["sector"],
            currency=entry["currency"],
            financials=entry["financials"],
        )
        store.ceo_profiles.create(company_id=company.id, **entry["ceo"])

    for currency, rate, change, change_percent, forecast, risk in _RATES:
        store.currency_rates.upsert(
            from_currency=currency,
            to_currency=base_currency,
            rate=Decimal(rate),
            change=Decimal(change),
            change_percent=Decimal(change_percent),
            forecast_24h=forecast,
            volatility_risk=risk,
        )

    logger.info(
        "Seeded store: %d companies, %d currency rates",
        len(store.companies.list_all()),
        len(store.currency_rates.list_all()),
    )
