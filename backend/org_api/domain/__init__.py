"""
DOMAIN LAYER - Read model of the organization directory

This layer contains:
- Value Objects: Pagination, sort order, department type, listing filters
- Ports: Interfaces the infrastructure implements (store, rate limiter, repositories)
- Exceptions: API errors mapped to the response envelope

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
