"""최애 멤버 모델 테스트 — 생성자와 update()의 타임스탬프 규칙.

OshiMember model tests — timestamp rules of the business constructor
and update(). No database involved.
"""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

from app.models.oshi_member import OshiMember


class TestOshiMemberConstruct:
    """생성자 테스트."""

    def test_fields_are_set(self):
        """세 비즈니스 필드가 설정됨."""
        m = OshiMember("Yui", 1, date(2000, 1, 1))
        assert m.member_name == "Yui"
        assert m.gender == 1
        assert m.birth_day == date(2000, 1, 1)
        assert m.id is None
        assert m.group_id is None

    def test_created_equals_updated(self):
        """생성 직후 created_at == updated_at."""
        for name, gender in [("Yui", 1), ("Mio", 2), ("", 0), ("Ritsu", -1)]:
            m = OshiMember(name, gender, date(1999, 12, 31))
            assert m.created_at == m.updated_at

    def test_timestamps_are_utc(self):
        """타임스탬프는 UTC aware."""
        m = OshiMember("Yui", 1, date(2000, 1, 1))
        assert m.created_at.tzinfo is not None
        assert m.created_at.utcoffset() == timedelta(0)


class TestOshiMemberUpdate:
    """update() 테스트."""

    def test_update_overwrites_fields(self):
        """필드가 덮어써짐."""
        m = OshiMember("Yui", 1, date(2000, 1, 1))
        m.update("Azusa", 2, date(2001, 11, 11))
        assert m.member_name == "Azusa"
        assert m.gender == 2
        assert m.birth_day == date(2001, 11, 11)

    def test_update_keeps_created_at(self):
        """created_at은 변하지 않음."""
        m = OshiMember("Yui", 1, date(2000, 1, 1))
        created = m.created_at
        m.update("Yui", 1, date(2000, 1, 1))
        m.update("Mugi", 3, date(2002, 7, 2))
        assert m.created_at == created

    def test_update_never_decreases_updated_at(self):
        """updated_at은 감소하지 않으며 created_at 이상."""
        m = OshiMember("Yui", 1, date(2000, 1, 1))
        for i in range(5):
            before = m.updated_at
            m.update(f"Yui{i}", i, date(2000, 1, 1))
            assert m.updated_at >= before
            assert m.created_at <= m.updated_at

    def test_update_refreshes_stamp(self):
        """update()는 현재 시각으로 스탬프를 갱신."""
        later = datetime(2030, 1, 1, tzinfo=timezone.utc)
        m = OshiMember("Yui", 1, date(2000, 1, 1))
        with patch("app.models.oshi_member.now_utc", return_value=later):
            m.update("Yui", 1, date(2000, 1, 1))
        assert m.updated_at == later
        assert m.created_at < later

    def test_update_survives_clock_step_back(self):
        """시계가 뒤로 가도 updated_at은 증가."""
        m = OshiMember("Yui", 1, date(2000, 1, 1))
        previous = m.updated_at
        with patch("app.models.oshi_member.now_utc", return_value=previous - timedelta(hours=1)):
            m.update("Yui", 1, date(2000, 1, 1))
        assert m.updated_at == previous + timedelta(microseconds=1)

    def test_update_on_coarse_clock(self):
        """같은 시각이 반환되어도 스탬프는 달라짐."""
        m = OshiMember("Yui", 1, date(2000, 1, 1))
        previous = m.updated_at
        with patch("app.models.oshi_member.now_utc", return_value=previous):
            m.update("Mio", 2, date(2000, 1, 1))
        assert m.updated_at > previous
