"""
KCP Infrastructure Store
========================
Relational snapshot of infrastructure objects and their annotations,
read by DbObjectLookup.
"""
