"""Time bank package.

This package is organized by feature modules (punches, employees, ledger,
reports) with a thin Flask controller layer over plain service/repository
layers. The ledger feature is the accounting engine: it turns punch events
into day ledgers, period summaries and compensatory time-bank balances.
"""
