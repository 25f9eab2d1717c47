"""
Core business logic modules for Recruit Match.

Submodules:
- matching: Factor scorers, match orchestration and statistics
"""
