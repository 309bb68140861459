"""GraphQL API for the repayment calculators."""
