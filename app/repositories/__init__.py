"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Entity repositories (member, item, order) extend BaseRepository for the
explicit create/update writes and add their own queries. The order query
repositories skip entities and select straight into response DTOs.
"""
