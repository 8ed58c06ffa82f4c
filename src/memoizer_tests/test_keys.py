from zuper_commons.test_utils import my_assert_equal

from memoizer import memoize_key


def test_key_positional() -> None:
    my_assert_equal(memoize_key((1, 2, 3)), "1,2,3")


def test_key_empty() -> None:
    my_assert_equal(memoize_key(()), "")
    my_assert_equal(memoize_key((), {}), "")


def test_key_cross_type_collision() -> None:
    my_assert_equal(memoize_key((1, 2, 3)), memoize_key(("1", 2, 3)))
    my_assert_equal(memoize_key((1, "2", True)), "1,2,True")


def test_key_kwargs_sorted() -> None:
    my_assert_equal(memoize_key((1,), {"z": 2, "a": 3}), "1,a=3,z=2")
