import pytest

from modcount.counter import BoundedCounter, ResetCounter
from modcount.chain import CounterChain


class TestConstruction:
    def test_defaults_to_lower_bound(self) -> None:
        c = BoundedCounter(12, lower_bound=5)
        assert c.current() == 5
        assert c.lower_bound == 5
        assert c.upper_bound == 12
        assert c.radix == 7

    def test_zero_lower_bound_by_default(self) -> None:
        assert BoundedCounter(3).current() == 0

    @pytest.mark.parametrize(
        "upper, lower, start",
        [(12, 5, 5), (12, 5, 11), (5, 0, 2), (2, -2, -1), (8, 7, 7)],
    )
    def test_start_value_is_current(self, upper: int, lower: int, start: int) -> None:
        assert BoundedCounter(upper, lower, start).current() == start

    @pytest.mark.parametrize("upper, lower", [(5, 5), (3, 4), (-1, 0)])
    def test_rejects_empty_range(self, upper: int, lower: int) -> None:
        with pytest.raises(ValueError, match="Upper bound must be greater"):
            BoundedCounter(upper, lower)

    @pytest.mark.parametrize("start", [4, 12, 13, -1])
    def test_rejects_out_of_range_start(self, start: int) -> None:
        with pytest.raises(ValueError, match=r"range \[5, 12\)"):
            BoundedCounter(12, lower_bound=5, start_value=start)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"upper_bound": 3.5},
            {"upper_bound": "3"},
            {"upper_bound": True},
            {"upper_bound": 3, "lower_bound": 0.0},
            {"upper_bound": 3, "start_value": 1.0},
        ],
    )
    def test_rejects_non_integers(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(TypeError):
            BoundedCounter(**kwargs)  # type: ignore[arg-type]


class TestAdvance:
    def test_increments_by_one(self) -> None:
        c = BoundedCounter(5)
        c.advance()
        assert c.current() == 1
        c.advance()
        assert c.current() == 2

    def test_wraps_to_lower_bound(self) -> None:
        c = BoundedCounter(12, lower_bound=5)
        for _ in range(6):
            c.advance()
        assert c.current() == 11
        c.advance()
        assert c.current() == 5

    def test_negative_range(self) -> None:
        c = BoundedCounter(2, lower_bound=-2)
        seen = [c.current()]
        for _ in range(4):
            c.advance()
            seen.append(c.current())
        assert seen == [-2, -1, 0, 1, -2]

    def test_range_of_size_one_wraps_every_step(self) -> None:
        resets: list[int] = []
        c = BoundedCounter(8, lower_bound=7).subscribe_on_reset(resets.append)
        c.advance()
        c.advance()
        assert c.current() == 7
        assert resets == [7, 7]

    def test_large_range(self) -> None:
        c = BoundedCounter(1_000_000)
        for _ in range(999_999):
            c.advance()
        assert c.current() == 999_999


class TestResetNotification:
    def test_scenario_lower_bound_five(self) -> None:
        resets: list[int] = []
        c = BoundedCounter(12, lower_bound=5).subscribe_on_reset(resets.append)
        for _ in range(7):
            c.advance()
        assert c.current() == 5
        assert resets == [5]

    def test_scenario_subscriber_called_once(self) -> None:
        resets: list[int] = []
        c = BoundedCounter(7, lower_bound=2)
        c.subscribe_on_reset(resets.append)
        for _ in range(5):
            c.advance()
        assert resets == [2]

    @pytest.mark.parametrize(
        "upper, lower, start", [(4, 0, 0), (4, 0, 3), (10, -3, 2), (6, 5, 5)]
    )
    def test_full_cycle_returns_to_start_with_one_reset(
        self, upper: int, lower: int, start: int
    ) -> None:
        resets: list[int] = []
        c = BoundedCounter(upper, lower, start).subscribe_on_reset(resets.append)
        for _ in range(upper - lower):
            c.advance()
        assert c.current() == start
        assert resets == [lower]

    def test_no_notification_without_wrap(self) -> None:
        resets: list[int] = []
        c = BoundedCounter(5).subscribe_on_reset(resets.append)
        for _ in range(4):
            c.advance()
        assert resets == []

    def test_multiple_subscribers(self) -> None:
        a: list[int] = []
        b: list[int] = []
        c = BoundedCounter(2).subscribe_on_reset(a.append).subscribe_on_reset(b.append)
        c.advance()
        c.advance()
        assert a == [0]
        assert b == [0]

    def test_unsubscribed_callback_not_called(self) -> None:
        a: list[int] = []
        b: list[int] = []
        c = (
            BoundedCounter(2)
            .subscribe_on_reset(a.append)
            .subscribe_on_reset(b.append)
            .unsubscribe_on_reset(a.append)
        )
        c.advance()
        c.advance()
        assert a == []
        assert b == [0]
        assert c.reset_subscriber_count() == 1

    def test_value_is_wrapped_before_notification(self) -> None:
        c = BoundedCounter(3, lower_bound=1)
        observed: list[int] = []
        c.subscribe_on_reset(lambda v: observed.append(c.current()))
        c.advance()
        c.advance()
        assert observed == [1]

    def test_subscriber_exception_propagates_after_wrap(self) -> None:
        def boom(v: int) -> None:
            raise RuntimeError("boom")

        c = BoundedCounter(2, start_value=1).subscribe_on_reset(boom)
        with pytest.raises(RuntimeError, match="boom"):
            c.advance()
        assert c.current() == 0

    def test_subscribe_rejects_non_callable(self) -> None:
        with pytest.raises(TypeError):
            BoundedCounter(2).subscribe_on_reset(5)  # type: ignore[arg-type]


def test_counter_and_chain_share_the_reset_counter_shape() -> None:
    assert isinstance(BoundedCounter(3), ResetCounter)
    assert isinstance(CounterChain(BoundedCounter(3)), ResetCounter)


def test_repr_shows_bounds_and_value() -> None:
    c = BoundedCounter(12, lower_bound=5, start_value=9)
    assert repr(c) == "BoundedCounter(upper_bound=12, lower_bound=5, value=9)"


def test_unhashable_callable_reset_subscriber() -> None:
    class Recorder:
        def __init__(self) -> None:
            self.seen: list[int] = []

        def __eq__(self, other: object) -> bool:
            return self is other

        __hash__ = None  # type: ignore[assignment]

        def __call__(self, value: int) -> None:
            self.seen.append(value)

    recorder = Recorder()
    c = BoundedCounter(2).subscribe_on_reset(recorder)
    c.advance()
    c.advance()
    assert recorder.seen == [0]

    chain = CounterChain(BoundedCounter(2)).subscribe_on_reset(recorder)
    chain.advance()
    chain.advance()
    assert recorder.seen == [0, (0,)]
