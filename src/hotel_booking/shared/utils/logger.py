import os

from aws_lambda_powertools import Logger

from hotel_booking.shared.config import DEFAULT_SERVICE_NAME


def get_logger(child: bool = False) -> Logger:
    """サービス共通の Logger を返す

    child=True の場合は親 Logger の設定（ハンドラ・Lambda コンテキスト）を引き継ぐ。
    """
    service_name = os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME)
    return Logger(service=service_name, child=child)
