class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class SeatCapacityExceededException(BusinessRuleViolationException):
    """搭乗人数を超えて座席を選択しようとした場合"""

    pass


class IncompleteSeatSelectionException(BusinessRuleViolationException):
    """選択した座席数が搭乗人数と一致しない場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class SeatAlreadyTakenException(DuplicateResourceException):
    """座席が他の予約で既に確保されている場合"""

    def __init__(self, flight_id: str, seat: str) -> None:
        super().__init__(f"Seat {seat} is already taken on flight {flight_id}")
        self.flight_id = flight_id
        self.seat = seat


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass


class InvalidInputException(DomainException):
    """クライアント入力の不備"""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldException(InvalidInputException):
    """必須項目が未指定・空の場合"""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Missing required field: {field}")


class InvalidFieldException(InvalidInputException):
    """項目の値が不正な場合"""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(field, f"Invalid value for {field}: {reason}")


class StoreFailureException(DomainException):
    """永続化層の操作に失敗した場合

    DynamoDB のエラー詳細は __cause__ に保持し、メッセージには含めない。
    """

    pass
