"""
Core of the order bot: conversation state machine and order ledger.
"""
