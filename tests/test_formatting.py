from productivity_insights.formatting import format_hour, percent, time_range


def test_twelve_hour_clock():
    assert [format_hour(h) for h in (0, 1, 11, 12, 13, 23)] == ["12 AM", "1 AM", "11 AM", "12 PM", "1 PM", "11 PM"]


def test_time_range_wraps_midnight():
    assert time_range(9) == "9 AM - 10 AM"
    assert time_range(11) == "11 AM - 12 PM"
    assert time_range(23) == "11 PM - 12 AM"


def test_percent_rounds_half_up():
    assert percent(0.125) == 13
    assert percent(1 / 3) == 33
    assert percent(1.0) == 100
