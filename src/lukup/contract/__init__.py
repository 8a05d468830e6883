"""
Contract - typed gateways for deployed Lukup contracts.
"""
