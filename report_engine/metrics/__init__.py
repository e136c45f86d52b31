"""
Metrics — Pure-function report modules.

Each module returns plain dictionaries / lists ready for charts and the
spreadsheet export. No UI, no side effects, inputs never mutated.

Modules:
    sales          — Revenue, order volume, profit per channel, revenue trend
    products       — Top products by quantity / revenue
    expenses       — Expense totals, categories, top items, monthly trend
    orders         — Status mix, order value, processing time, districts
    financials     — Revenue vs expenses per month
    profitability  — Net profit, margin, averages, profit by channel
    inventory      — Stock value, low-stock alerts, status mix
    consumption    — Units consumed per product per month
"""
