"""
PRESENTATION LAYER - HTTP surface

- api/           → FastAPI routers (listings, metrics)
- dependencies/  → Request parsing (query parameters, client identity)
- middleware/    → Correlation IDs, request metrics
- envelope.py    → Uniform success / error response bodies
"""
