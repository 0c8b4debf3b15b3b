"""
Core package: question models, wire-format schema and serialization.
"""
