"""
Core utilities shared by every report.

Modules:
    cleaning  — Numeric/text coercion, currency formatting
    dates     — Date parsing, month buckets, date-range filtering
    records   — Record normalization and DataFrame builders
    channels  — Order-source naming and ad-spend attribution
    identity  — Product name / category / grouping-key resolution
"""
