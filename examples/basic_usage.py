#!/usr/bin/env python3
"""
Basic Usage Example - Pump-Out Bulk Plan Engine

This script walks through what a booking handler does with the engine:
- Show how many extra pump-outs a plan can take on a purchase date
- Quote and allocate a purchase
- Evaluate booking attempts against the request history
- Summarize usage for the plan status panel

Run: python examples/basic_usage.py
"""

from datetime import date

from pumpout_engine.engine import BulkPlanEngine
from pumpout_engine.logging import configure_logging
from pumpout_engine.schedule.models import RequestStatus, UsageRecord


def main() -> None:
    configure_logging(level="WARNING")
    engine = BulkPlanEngine()

    plan_name = "Royal Flush Bulk"
    purchase_day = date(2024, 5, 8)

    window = engine.purchase_window(plan_name, purchase_day)
    print(f"{plan_name} bought {purchase_day}: {window.message}")

    quote = engine.quote_purchase(plan_name, purchase_day, 4)
    if not quote.is_valid:
        print(f"Purchase refused: {quote.check.message}")
        return
    print(f"Total cost: ${quote.total_cost_cents / 100:.2f} "
          f"for {quote.allocation.total_pump_outs} pump-outs")

    allocation = quote.allocation
    history = [
        UsageRecord(date(2024, 5, 14), RequestStatus.COMPLETED),
        UsageRecord(date(2024, 5, 29), RequestStatus.CANCELED),
        UsageRecord(date(2024, 6, 4), RequestStatus.SCHEDULED),
    ]
    today = date(2024, 6, 1)

    for request_day in (date(2024, 6, 6), date(2024, 5, 31), date(2024, 11, 4)):
        decision = engine.evaluate_request(allocation, history, request_day, today)
        verdict = "accepted" if decision.is_accepted else f"refused: {decision.message}"
        print(f"Request for {request_day}: {verdict}")

    summary = engine.usage_summary(allocation, history, today)
    print(f"Used {summary.used_pump_outs}/{summary.total_pump_outs} "
          f"({summary.usage_percent}%), {summary.open_weeks} weeks open, "
          f"status {summary.status.value}")


if __name__ == "__main__":
    main()
