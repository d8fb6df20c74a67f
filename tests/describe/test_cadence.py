"""Unit tests for the cadence phrase builder."""

from __future__ import annotations

from rrdescribe.describe.cadence import build_cadence
from rrdescribe.describe.config import DescribeConfig, TimeConfig

AT_FIVE = {"hours": [5], "minutes": [0], "seconds": [0]}


class TestDaily:
    def test_daily_at_time(self, recur):
        d = recur("daily", by=AT_FIVE)
        assert build_cadence(d) == "every day at 5:00"

    def test_daily_without_time(self, recur):
        assert build_cadence(recur("daily")) == "every day"

    def test_daily_interval(self, recur):
        d = recur("daily", interval=3, by={"hours": [9]})
        assert build_cadence(d) == "every 3 days at 9:00"

    def test_daily_multiple_hours(self, recur):
        d = recur("daily", by={"hours": [9, 17], "minutes": [0]})
        assert build_cadence(d) == "every day at 9:00 and 17:00"

    def test_daily_seconds_format(self, recur):
        d = recur("daily", by={"hours": [5], "minutes": [0], "seconds": [15]})
        cfg = DescribeConfig(time=TimeConfig(time_format="auto"))
        assert build_cadence(d, cfg) == "every day at 5:00:15"


class TestWeekly:
    def test_weekdays_joined_with_and(self, recur):
        d = recur(
            "weekly",
            interval=2,
            by={"weekdays": [{"weekday": 1}, {"weekday": 3}], **AT_FIVE},
            count=3,
        )
        cfg = DescribeConfig(limits="count_only")
        assert build_cadence(d, cfg) == "every 2 weeks on monday and wednesday at 5:00 for 3 occurrences"

    def test_three_weekdays_without_oxford_comma(self, recur):
        d = recur("weekly", by={"weekdays": [{"weekday": 1}, {"weekday": 3}, {"weekday": 5}]})
        assert build_cadence(d) == "every week on monday, wednesday and friday"

    def test_no_weekdays_is_base_only(self, recur):
        d = recur("weekly", by=AT_FIVE)
        assert build_cadence(d) == "every week"


class TestMonthly:
    def test_single_month_day(self, recur):
        d = recur("monthly", by={"month_days": [15], **AT_FIVE})
        assert build_cadence(d) == "every month on the 15th at 5:00"

    def test_multiple_month_days(self, recur):
        d = recur("monthly", by={"month_days": [1, 15]})
        assert build_cadence(d) == "every month on the 1st and 15th"

    def test_last_day_of_month(self, recur):
        d = recur("monthly", by={"month_days": [-1]})
        assert build_cadence(d) == "every month on the last"

    def test_long_ordinals_forced(self, recur):
        d = recur("monthly", by={"month_days": [1]})
        assert build_cadence(d, DescribeConfig(ordinals="long")) == "every month on the first"

    def test_last_weekday_from_nth(self, recur):
        d = recur("monthly", by={"weekdays": [{"weekday": 2, "nth": -1}], **AT_FIVE})
        assert build_cadence(d) == "every month on the last tuesday at 5:00"

    def test_weekday_position_from_setpos(self, recur):
        d = recur("monthly", by={"weekdays": [{"weekday": 2}], "setpos": [3]})
        assert build_cadence(d) == "every month on the third tuesday"

    def test_setpos_and_nth_are_unioned(self, recur):
        d = recur(
            "monthly",
            by={"weekdays": [{"weekday": 2, "nth": 1}], "setpos": [-1]},
        )
        assert build_cadence(d) == "every month on the last or first tuesday"

    def test_same_position_from_both_sources_once(self, recur):
        d = recur("monthly", by={"weekdays": [{"weekday": 2, "nth": 3}], "setpos": [3]})
        assert build_cadence(d) == "every month on the third tuesday"

    def test_plain_weekdays(self, recur):
        d = recur("monthly", by={"weekdays": [{"weekday": 6}, {"weekday": 7}]})
        assert build_cadence(d) == "every month on saturday and sunday"

    def test_no_by_fields(self, recur):
        assert build_cadence(recur("monthly", by=AT_FIVE)) == "every month"


class TestYearlySingleMonth:
    def test_month_and_day(self, recur):
        d = recur("yearly", by={"months": [7], "month_days": [20], **AT_FIVE}, count=3)
        text = build_cadence(d, DescribeConfig(limits="count_only"))
        assert "on july 20" in text
        assert "for 3 occurrences" in text
        assert text == "every year on july 20 at 5:00 for 3 occurrences"

    def test_month_and_several_days(self, recur):
        d = recur("yearly", by={"months": [3], "month_days": [1, 15]})
        assert build_cadence(d) == "every year in march on the 1st and 15th"

    def test_positioned_weekday(self, recur):
        d = recur("yearly", by={"months": [7], "weekdays": [{"weekday": 2, "nth": 3}]})
        assert build_cadence(d) == "every year in july on the third tuesday"

    def test_plain_weekday(self, recur):
        d = recur("yearly", by={"months": [4], "weekdays": [{"weekday": 4}], **AT_FIVE})
        assert build_cadence(d) == "every year in april on thursday at 5:00"

    def test_month_only(self, recur):
        d = recur("yearly", by={"months": [12], "hours": [8]})
        assert build_cadence(d) == "every year in december at 8:00"

    def test_capitalized_names(self, recur):
        d = recur("yearly", by={"months": [7], "month_days": [4]})
        assert build_cadence(d, DescribeConfig(lowercase=False)) == "every year on July 4"


class TestYearlyMultipleMonths:
    def test_positioned_weekdays(self, recur):
        d = recur(
            "yearly",
            by={
                "months": [1, 2, 4],
                "weekdays": [{"weekday": 2}, {"weekday": 3}, {"weekday": 4}],
                "setpos": [3],
            },
        )
        text = build_cadence(d)
        assert "in january, february, or april" in text
        assert "on the third tuesday, wednesday, or thursday" in text

    def test_months_only(self, recur):
        d = recur("yearly", by={"months": [1, 7]})
        assert build_cadence(d) == "every year in january or july"

    def test_months_and_days(self, recur):
        d = recur("yearly", by={"months": [1, 7], "month_days": [1, 15], **AT_FIVE})
        assert build_cadence(d) == "every year in january or july on the 1st and 15th at 5:00"

    def test_months_and_single_day(self, recur):
        d = recur("yearly", by={"months": [1, 3, 7], "month_days": [5]})
        assert build_cadence(d) == "every year in january, march, or july on the 5th"

    def test_plain_weekday(self, recur):
        d = recur("yearly", by={"months": [1, 4], "weekdays": [{"weekday": 4}], **AT_FIVE})
        assert build_cadence(d) == "every year in january or april on thursday at 5:00"


class TestYearlyWithoutMonths:
    def test_positioned_weekday(self, recur):
        d = recur("yearly", by={"weekdays": [{"weekday": 5}], "setpos": [-1]})
        assert build_cadence(d) == "every year on the last friday"

    def test_plain_weekday(self, recur):
        d = recur("yearly", by={"weekdays": [{"weekday": 1}, {"weekday": 2}]})
        assert build_cadence(d) == "every year on monday and tuesday"

    def test_nothing(self, recur):
        assert build_cadence(recur("yearly", by=AT_FIVE)) == "every year"


class TestOtherFrequencies:
    def test_hourly_is_base_only(self, recur):
        assert build_cadence(recur("hourly", interval=3, by=AT_FIVE)) == "every 3 hours"

    def test_minutely(self, recur):
        assert build_cadence(recur("minutely")) == "every minute"

    def test_lexicon_override(self, recur):
        cfg = DescribeConfig(lexicon={"noun": {"daily": "night"}})
        assert build_cadence(recur("daily", by={"hours": [22]}), cfg) == "every night at 22:00"

    def test_mapping_config(self, recur):
        d = recur("daily", by={"hours": [17], "minutes": [0]})
        text = build_cadence(d, {"time": {"hour_cycle": "h12"}})
        assert text.lower() == "every day at 5:00 pm"
