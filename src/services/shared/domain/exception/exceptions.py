class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class InvalidInputException(DomainException):
    """入力値が不正、または必須データが欠けている場合"""

    pass


class ResourceNotFoundException(InvalidInputException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（バージョンや状態が期待値と異なる場合）"""

    pass
