from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - 新規作成 (save) と既存集約の条件付き更新 (update) を区別する
    - 検索メソッドは集約ごとのサブクラスで定義する
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """新規の集約を永続化する（既に存在する場合は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def update(self, aggregate: T) -> None:
        """既存の集約を更新する（競合時は OptimisticLockException）"""
        raise NotImplementedError
