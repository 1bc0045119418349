from followers_service.auth import get_user_from_context


def test_returns_fixed_user_id():
    assert get_user_from_context({}) == "user_id"


def test_same_user_for_any_context():
    assert get_user_from_context(None) == get_user_from_context({"anything": 1})