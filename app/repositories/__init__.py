"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Every query is scoped by the owning user id. OshiMemberRepository adds
the optimistic-lock save; OshiGroupRepository adds the cascading delete.
"""
