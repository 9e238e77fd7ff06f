from decimal import Decimal, InvalidOperation

from services.shared.domain.exception import InvalidFieldException


def to_decimal(field: str, v: object) -> Decimal:
    """任意の値を有限の Decimal に変換する

    すでに Decimal の場合はそのまま検証し、それ以外は str 経由で変換する。
    変換できない値・NaN・無限大・bool は InvalidFieldException とする
    （NaN を黙って保存しない）。
    """
    if isinstance(v, bool):
        raise InvalidFieldException(field, "must be a number")
    if isinstance(v, Decimal):
        value = v
    else:
        try:
            value = Decimal(str(v).strip())
        except InvalidOperation as e:
            raise InvalidFieldException(field, "must be a number") from e

    if not value.is_finite():
        raise InvalidFieldException(field, "must be a finite number")
    return value


def is_blank(v: object) -> bool:
    """未指定・None・空白のみの文字列を「空」とみなす"""
    if v is None:
        return True
    if isinstance(v, str):
        return not v.strip()
    return False
