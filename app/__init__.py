"""FindIt notification service.

Kept as a regular package so the local ``app`` takes precedence over any
similarly named distribution installed in the environment.
"""
