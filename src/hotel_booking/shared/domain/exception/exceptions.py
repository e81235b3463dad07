class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class ResourceNotFoundException(BusinessRuleViolationException):
    """リソースが見つからない場合"""

    pass


class NoRoomAvailableException(BusinessRuleViolationException):
    """条件に合う空室がない場合"""

    pass


class PaymentDeclinedException(BusinessRuleViolationException):
    """決済が拒否された場合（限度額超過など）"""

    pass


class NotificationFailedException(BusinessRuleViolationException):
    """予約確認の通知が送信できなかった場合"""

    pass


class InvalidRequestException(DomainException):
    """リクエストの形式が不正な場合（宿泊日数・人数など）"""

    pass


class RateUnavailableException(DomainException):
    """為替レートが取得できない場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass
