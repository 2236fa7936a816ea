"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Command services (member, item, order) enforce the business rules inside the
caller's transaction; OrderQueryService assembles the order list responses.
Services call repositories for DB operations and never commit.
"""
