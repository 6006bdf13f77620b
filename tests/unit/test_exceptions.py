import pytest

from vcardqr.exceptions import (
    ContainerWriteFailureError,
    EncodingError,
    PayloadTooLargeError,
)


def test_hierarchy() -> None:
    assert issubclass(PayloadTooLargeError, EncodingError)
    assert issubclass(ContainerWriteFailureError, EncodingError)
    assert not issubclass(PayloadTooLargeError, ContainerWriteFailureError)


@pytest.mark.parametrize(
    "cls,kind",
    [
        (PayloadTooLargeError, "PayloadTooLarge"),
        (ContainerWriteFailureError, "ContainerWriteFailure"),
    ],
)
def test_kind_tags(cls: type, kind: str) -> None:
    assert cls.kind == kind
    assert cls("boom").kind == kind


def test_str_with_context() -> None:
    err = PayloadTooLargeError(
        "Payload exceeds QR symbol capacity",
        context={"payload_bytes": 2332, "capacity": 2331},
    )
    assert str(err) == (
        "PayloadTooLargeError: Payload exceeds QR symbol capacity "
        "(payload_bytes=2332, capacity=2331)"
    )
    assert err.message == "Payload exceeds QR symbol capacity"


def test_str_without_context() -> None:
    err = ContainerWriteFailureError("codec fault")
    assert str(err) == "ContainerWriteFailureError: codec fault"
    assert err.context == {}
    assert "kind='ContainerWriteFailure'" in repr(err)
