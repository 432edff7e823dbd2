"""Pipeline orchestration.

Chains the cleaning stages over a whole feed:
1. Per feature → canonical geometry + cleaned properties
2. Assemble a new FeatureCollection
3. Limit coordinate precision, then enforce winding order
"""
