"""
Project validation engine.

Runs a fixed sequence of stage checks over a scaffolded project tree and
collects their findings in a FindingStore.
"""
