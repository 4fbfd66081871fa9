"""서비스 패키지 — 최애 그룹/멤버 비즈니스 로직 계층.

Service package — Business rules for oshi groups and members.
Services enforce ownership and duplicate-name rules, translate misses
into HTTP errors and hand persistence to the repositories.
"""
