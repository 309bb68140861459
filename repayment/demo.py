"""Demo: dual-rate mortgage and credit-card payoff scenarios."""

from repayment.calculate import calculate
from repayment.calculators.payoff_calculator import estimate_apr, repayment_breakdown
from repayment.numbers import format_currency
from repayment.products.credit_card import CreditCardBalance
from repayment.products.mortgage import DualRateMortgage


def main() -> None:
    # 1) 200k mortgage, 25Y term, 4.5% fixed for 5Y then 6.5%
    mortgage = DualRateMortgage(
        principal=200_000,
        initial_rate=4.5,
        loan_term_years=25,
        fixed_term_years=5,
        secondary_rate=6.5,
    )
    m = calculate(mortgage)

    # 2) Same mortgage with 200/month overpayment
    overpaid = calculate(
        DualRateMortgage(
            principal=200_000,
            initial_rate=4.5,
            loan_term_years=25,
            fixed_term_years=5,
            secondary_rate=6.5,
            overpayment=200,
        )
    )

    # 3) 5,000 card balance at 25% APR, safe-minimum payment
    card = calculate(CreditCardBalance(balance=5_000, apr=25))
    split = repayment_breakdown(card)

    # 4) Same balance paying only 10/month
    low = calculate(CreditCardBalance(balance=5_000, apr=25, monthly_payment=10))

    # 5) APR implied by paying 250/month for 24 months
    implied = estimate_apr(5_000, 250, 24)

    print("=== Repayment Demo ===\n")
    print("1) Mortgage (200,000, 25Y, 4.5% fixed 5Y, then 6.5%)")
    print(f"   Initial payment   = {format_currency(m.initial_monthly_payment)}")
    print(f"   Secondary payment = {format_currency(m.secondary_monthly_payment)}")
    print(f"   Balance at switch = {format_currency(m.remaining_balance_after_fixed_term)}")
    print(f"   Years remaining   = {m.years_remaining}\n")
    print("2) Same mortgage, 200/month overpayment")
    print(f"   Initial payment   = {format_currency(overpaid.initial_monthly_payment)}")
    print(f"   Years remaining   = {overpaid.years_remaining}\n")
    print("3) Credit card (5,000 at 25% APR, safe minimum payment)")
    print(f"   Monthly payment   = {format_currency(card.monthly_payment)}")
    print(f"   Months to pay off = {card.payoff_months}")
    print(f"   Total interest    = {format_currency(card.total_interest_paid)}")
    print(f"   Interest share    = {split.interest_share:.1%}\n")
    print("4) Credit card (5,000 at 25% APR, paying 10/month)")
    print(f"   Growing debt      = {low.growing_debt}")
    print(f"   Stopped at month  = {low.payoff_months}\n")
    print("5) APR implied by 250/month over 24 months on 5,000")
    print(f"   APR               ≈ {implied.apr if implied else 'N/A'}%\n")
    print("Done.")


if __name__ == "__main__":
    main()
