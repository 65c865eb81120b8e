"""
Host-side services: timer bookkeeping and the headless simulation runner.
"""
