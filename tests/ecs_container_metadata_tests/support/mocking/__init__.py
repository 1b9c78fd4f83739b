from typing import Callable, cast, Any, Type, TypeVar
from unittest.mock import create_autospec

from ecs_container_metadata_tests.support.mocking.stub import Stub
from ecs_container_metadata_tests.support.mocking.verifiable_spy import VerifiableSpy


T = TypeVar("T")


# Callable[[], T] rather than Type[T] so that T can be abstract
def mock_class(cls: Type[T] | Callable[[], T]) -> T:
    return cast(T, create_autospec(spec=cls, instance=True))


def verify(mock: Any) -> VerifiableSpy:
    return VerifiableSpy(mock)


def when_calling(mock: Any) -> Stub:
    return Stub(mock)
