from modcount import BoundedCounter, CounterChain


def test_bounded_counter() -> None:
    c = BoundedCounter(3)
    c.advance()
    assert c.current() == 1


def test_counter_chain() -> None:
    chain = CounterChain(BoundedCounter(2), BoundedCounter(2))
    chain.advance()
    chain.advance()
    assert chain.snapshot() == (0, 1)


if __name__ == "__main__":
    test_bounded_counter()
    test_counter_chain()
    print("Basic test passed!")
