from domain.kiosk.promotion import effective_price, is_promotion_active, promotion_discount


def test_blank_promotion_price_is_inactive(make_record, evaluator):
    p = make_record(price=50.0, promotion_price_raw="  ")
    assert is_promotion_active(p, evaluator) is False
    assert effective_price(p, evaluator) == 50.0


def test_active_promotion_inside_window(make_record, evaluator):
    p = make_record(
        price=50.0,
        promotion_price_raw="39",
        promotion_start="01/10/2025",
        promotion_end="31/10/2025",
    )
    assert is_promotion_active(p, evaluator) is True
    assert effective_price(p, evaluator) == 39.0
    assert promotion_discount(p, evaluator) == 11.0


def test_expired_window_is_inactive(make_record, evaluator):
    p = make_record(price=50.0, promotion_price_raw="39", promotion_end="01/10/2025")
    assert is_promotion_active(p, evaluator) is False
    assert promotion_discount(p, evaluator) == 0.0


def test_weekday_list_is_case_insensitive(make_record, evaluator):
    # fixed clock is a Wednesday
    assert is_promotion_active(make_record(promotion_price_raw="39", promotion_days="Mon,Tue"), evaluator) is False
    assert is_promotion_active(make_record(promotion_price_raw="39", promotion_days="mon, WED"), evaluator) is True


def test_unreadable_promotion_price_keeps_regular_price(make_record, evaluator):
    p = make_record(price=50.0, promotion_price_raw="soon")
    assert is_promotion_active(p, evaluator) is True
    assert effective_price(p, evaluator) == 50.0
    assert promotion_discount(p, evaluator) == 0.0


def test_discount_never_negative(make_record, evaluator):
    p = make_record(price=30.0, promotion_price_raw="35")
    assert promotion_discount(p, evaluator) == 0.0
