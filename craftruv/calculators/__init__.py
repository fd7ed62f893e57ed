"""
Deterministic calculation engine.

Pure Python math. No AI, no I/O.
Given a furniture type, a material and outer dimensions in millimetres,
produce an exact price breakdown or a per-component material list.
"""
