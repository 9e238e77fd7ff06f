from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値オブジェクト（区間・座席）へのアクセスは必ず集約ルートを経由
    - 永続化の単位 = 集約境界（往復予約も 1 レコード）
    """
