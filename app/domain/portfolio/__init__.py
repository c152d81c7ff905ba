"""
Portfolio bounded context: domain layer.

This module contains all domain logic for the dashboard:
- Recommendation scoring (BUY/SELL/HOLD signals)
- Currency rate forecasting
- Portfolio valuation across currencies
- Market condition monitoring
"""
