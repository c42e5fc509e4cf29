"""
Deterministic calculation engine.

Pure Python math. No I/O, no state between calls.
Given a tube shape, its dimensions and an optional run length, produce
the steel weight per foot/meter and the total weight.
"""
