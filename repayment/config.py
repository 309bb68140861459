"""
Engine constants for the repayment calculators.

Amounts are in the loan's currency, rates are annual percentages unless the
name says otherwise.
"""

# ── Credit-card payoff simulation ────────────────────────────────────
DEFAULT_APR_PERCENT = 25.0           # substituted when APR is missing or <= 0
MAX_SIMULATION_MONTHS = 600          # hard cap on simulated months (50 years)
BALANCE_TOLERANCE = 0.005            # balances under half a cent count as cleared
DIVERGENCE_MONTHS = 3                # consecutive growth months before stopping

# Safe minimum payment: max(floor, balance * (monthly rate + share))
MINIMUM_PAYMENT_FLOOR = 15.0
MINIMUM_PAYMENT_PRINCIPAL_SHARE = 0.025

# ── APR estimation (bisection on a monthly rate) ─────────────────────
APR_SEARCH_MAX_MONTHLY_RATE = 0.05   # 5% monthly = 60% APR
APR_SEARCH_ITERATIONS = 50
APR_SEARCH_MAX_MONTHS = 1000

# ── Display ──────────────────────────────────────────────────────────
CURRENCY_DECIMALS = 2
