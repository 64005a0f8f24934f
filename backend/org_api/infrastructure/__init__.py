"""
INFRASTRUCTURE LAYER - Implementations of domain ports

- persistence/  → Prisma-backed store handle and SQL repositories
- rate_limit/   → Admission control on top of the `limits` library
"""
