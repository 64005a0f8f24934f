"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- queries/   → Listing use cases (departments, news, users)
- dto/       → Data Transfer Objects returned to the presentation layer
- common/    → Shared interfaces and the row aggregator

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""
