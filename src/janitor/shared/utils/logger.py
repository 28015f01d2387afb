from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None) -> Logger:
    """Powertools Logger を生成する

    service_name を省略した場合は POWERTOOLS_SERVICE_NAME が使われる。
    """
    return Logger(service=service_name)
