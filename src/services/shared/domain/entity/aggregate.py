from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値オブジェクトへの変更は必ず集約ルートのメソッドを経由
    - 永続化の単位 = 集約境界（1集約 = 1 DynamoDB アイテム）
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
