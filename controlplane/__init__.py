"""
KCP Machine Filters
===================
Predicate engine that decides, per control-plane machine, whether it
satisfies a named rollout condition.

Filtering is evaluation, not action.
The reconciler decides what to do with the verdict.
"""
