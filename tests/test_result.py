import pytest

from argctx.result import Err, ErrorKind, FlagError, Ok


def test_ok():
    res = Ok(1)
    assert res.isOk()
    assert not res.isErr()
    assert res.unwrap() == 1
    assert res.unwrapOr(2) == 1


def test_err():
    res = Err("boom")
    assert res.kind == ErrorKind.INVALID_VALUE
    assert res.isErr()
    assert not res.isOk()
    assert res.unwrapOr(2) == 2


def test_err_unwrap():
    with pytest.raises(FlagError, match="boom") as e:
        Err("boom", ErrorKind.NOT_FOUND).unwrap()
    assert e.value.kind == ErrorKind.NOT_FOUND
    assert isinstance(e.value, RuntimeError)


def test_match():
    match Ok(3):
        case Ok(v):
            assert v == 3
        case _:
            assert False

    match Err("boom", ErrorKind.MISSING_VALUE):
        case Err(message, ErrorKind.MISSING_VALUE):
            assert message == "boom"
        case _:
            assert False


def test_equality():
    assert Ok(1) == Ok(1)
    assert Ok(1) != Ok(2)
    assert Err("a") != Err("a", ErrorKind.NOT_FOUND)
