"""
Core graph construction and interaction state.

Everything in this package is pure Python with no drawing concerns:
the input tree, leaf identifiers, bilinks, link projection and the
lock/highlight state machine.
"""
