"""
report_engine — Business metrics for the storefront back-office.

Pure, synchronous aggregation over already-loaded orders, expenses,
inventory and the product catalog. No I/O, no caching.

Submodules:
    - config:   Engine settings (currency, channel defaults, top-N limits)
    - schemas:  Record models (orders, expenses, inventory, catalog)
    - core:     Cleaning, dates, record normalization, identity resolution
    - metrics:  One pure-function module per report domain
    - ingestor: Normalizes raw collections once per report run
    - analyzer: Single entry point producing a full report snapshot
    - export:   Spreadsheet-ready sheets for the Excel export
"""
