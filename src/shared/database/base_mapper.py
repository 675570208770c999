import abc
from typing import Generic, Iterable, TypeVar


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class BaseEntityMapper(abc.ABC, Generic[TModel, TEntity]):
    """Converts between a read-only domain model and its database entity."""

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TEntity:
        pass

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TEntity) -> TModel:
        pass

    @classmethod
    def to_models(cls, entities: Iterable[TEntity]) -> list[TModel]:
        return [cls.to_model(entity) for entity in entities]
